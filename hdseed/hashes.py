
#
# Python-hdseed -- BIP-39 Mnemonic Seeds and BIP-32 HD Wallet Key Derivation
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-hdseed is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-hdseed is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
from __future__		import annotations

import hashlib
import hmac

from Crypto.Hash	import RIPEMD160, keccak

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
The raw cryptographic primitives used by BIP-39 and BIP-32.

OpenSSL 3 no longer provides RIPEMD-160 via hashlib on many platforms, so we use pycryptodome's
implementation (as we do for Keccak-256, which hashlib's SHA3 is *not*).
"""


def hmac_sha512( key: bytes, msg: bytes ) -> bytes:
    return hmac.new( key, msg, hashlib.sha512 ).digest()


def sha256( data: bytes ) -> bytes:
    return hashlib.sha256( data ).digest()


def ripemd160( data: bytes ) -> bytes:
    return RIPEMD160.new( data ).digest()


def keccak256( data: bytes ) -> bytes:
    """The original Keccak-256 (as used by Ethereum), not the finalized NIST SHA3-256."""
    return keccak.new( data=data, digest_bits=256 ).digest()


def pbkdf2_hmac_sha512( password: bytes, salt: bytes, iterations: int, length: int ) -> bytes:
    return hashlib.pbkdf2_hmac( 'sha512', password, salt, iterations, dklen=length )
