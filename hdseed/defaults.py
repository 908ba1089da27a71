
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

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

#
# BIP-39 Mnemonic Phrases
#
#     https://github.com/bitcoin/bips/blob/master/bip-0039.mediawiki
#
# Each 32 bits of entropy adds 1 bit of checksum; every 11 bits of (entropy || checksum) selects
# one of 2048 words.  So, 128 bits of entropy + 4 bits checksum == 132 bits == 12 words.
#
BITS_DEFAULT			= 128
BITS_BIP39			= (128, 160, 192, 224, 256)
WORDS_BIP39			= (12, 15, 18, 21, 24)

RADIX_BITS			= 11
WORDLIST_SIZE			= 2 ** RADIX_BITS  # 2048

LANGUAGE			= 'english'

# BIP-39 Seed stretching: PBKDF2-HMAC-SHA512, w/ salt "mnemonic" + passphrase
PBKDF2_ROUNDS			= 2048
PBKDF2_SALT			= "mnemonic"
SEED_BYTES			= 64

#
# BIP-32 HD Wallet Derivation
#
#     https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki
#
# A master node may be created from 128-, 256- or 512-bit seeds.  The depth is serialized as a
# single byte, so no node may be deeper than 255.
#
SEED_LENGTHS			= (16, 32, 64)
BIP32_SEED_KEY			= b"Bitcoin seed"
HARDENED			= 0x80000000
DEPTH_MAX			= 255

#
# HD Wallet Derivation Paths (Standard BIP-44)
#
# BIP-44 defines the purpose of each depth level:
#    m / purpose’ / coin_type’ / account’ / change / address_index
#
# Use https://iancoleman.io/bip39/ to confirm the derivations
#
PATH_ACCOUNT_DEFAULT		= "m/44'/60'/0'/0"    # The Ethereum account "root"
PATH_DEFAULT			= "m/44'/60'/0'/0/0"  # .. and its first address
