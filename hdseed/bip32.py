
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

import logging

from dataclasses	import dataclass
from typing		import Union

from .defaults		import BIP32_SEED_KEY, DEPTH_MAX, SEED_LENGTHS
from .hashes		import hmac_sha512, ripemd160
from .keys		import PrivateKey, PublicKey
from .path		import ChildNumber, DerivationPath
from .util		import commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "ExtendedKeyError", "SeedLengthError", "DepthTooLarge", "ExtendedKey" )

log				= logging.getLogger( __package__ )


class ExtendedKeyError( ValueError ):
    pass


class SeedLengthError( ExtendedKeyError ):
    def __init__( self, length ):
        self.length		= length
        super().__init__( f"BIP-32 seed must be {commas( SEED_LENGTHS, final='or' )} bytes, not {length}" )


class DepthTooLarge( ExtendedKeyError ):
    def __init__( self ):
        super().__init__( f"BIP-32 derivation depth cannot exceed {DEPTH_MAX}" )


@dataclass( eq=True, frozen=True )
class ExtendedKey:
    """A BIP-32 HD wallet node: a key pair, its chain code, and its position in the tree.  Only the
    parent's fingerprint is retained; a derived ExtendedKey holds no reference to its parent.

    """
    private_key: PrivateKey
    chain_code: bytes
    depth: int			= 0
    parent_fingerprint: bytes	= bytes( 4 )
    child_number: ChildNumber	= ChildNumber( 0 )

    def __post_init__( self ):
        assert len( self.chain_code ) == 32, \
            f"BIP-32 chain code must be 32 bytes, not {len( self.chain_code )}"
        assert 0 <= self.depth <= DEPTH_MAX, \
            f"BIP-32 depth must be in the range [0,{DEPTH_MAX}], not {self.depth}"
        assert len( self.parent_fingerprint ) == 4, \
            f"BIP-32 parent fingerprint must be 4 bytes, not {len( self.parent_fingerprint )}"

    @classmethod
    def new_master( cls, seed: Union[bytes,bytearray] ) -> ExtendedKey:
        """Create the master (root) node from a 128-, 256- or 512-bit seed.  An invalid master key
        (probability ~1 in 2^127) raises InvalidKeyError."""
        seed			= bytes( seed )
        if len( seed ) not in SEED_LENGTHS:
            raise SeedLengthError( len( seed ))
        I			= hmac_sha512( BIP32_SEED_KEY, seed )
        master			= cls(
            private_key		= PrivateKey( I[:32] ),
            chain_code		= I[32:],
        )
        log.debug( f"Derived BIP-32 master key {master.fingerprint.hex()} from {len( seed ) * 8}-bit seed" )
        return master

    @property
    def public_key( self ) -> PublicKey:
        return self.private_key.public_key()

    @property
    def fingerprint( self ) -> bytes:
        """The 4-byte identifier of this node, recorded as its childrens' parent_fingerprint."""
        return ripemd160( self.public_key.to_bytes() )[:4]

    @property
    def address( self ) -> str:
        return self.public_key.address()

    def derive_child( self, child_number: Union[ChildNumber,int] ) -> ExtendedKey:
        """Derive the child node; hardened children commit to the parent private key, normal
        children only to the parent public key.

        """
        if not isinstance( child_number, ChildNumber ):
            child_number	= ChildNumber( child_number )
        if self.depth + 1 > DEPTH_MAX:
            raise DepthTooLarge()
        if child_number.is_hardened:
            data		= b'\x00' + self.private_key.to_bytes()
        else:
            data		= self.public_key.to_bytes()
        I			= hmac_sha512( self.chain_code, data + child_number.to_bytes() )
        return self.__class__(
            private_key		= self.private_key.derive_child( I[:32] ),
            chain_code		= I[32:],
            depth		= self.depth + 1,
            parent_fingerprint	= self.fingerprint,
            child_number	= child_number,
        )

    def derive_path( self, path: Union[DerivationPath,str] ) -> ExtendedKey:
        """Walk the path from this node, one derive_child per component; any failure propagates."""
        if not isinstance( path, DerivationPath ):
            path		= DerivationPath.parse( path )
        node			= self
        for child_number in path:
            node		= node.derive_child( child_number )
        log.debug( f"Derived BIP-32 key {node.fingerprint.hex()} at {path}" )
        return node

    def __repr__( self ):
        # Never reveal the private key or chain code in logs or tracebacks
        return f"{self.__class__.__name__}(depth={self.depth}, child={self.child_number}, public_key={self.public_key!r})"
