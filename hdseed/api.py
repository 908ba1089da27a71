
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
import string

from typing		import Iterator, Optional, Tuple, Union

from .bip32		import ExtendedKey
from .bip39		import Mnemonic, MnemonicType, Seed
from .defaults		import BITS_DEFAULT, PATH_DEFAULT
from .path		import path_parser, path_sequence
from .util		import into_bytes
from .wordlist		import detect_language, wordtable

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "produce_mnemonic", "recover_mnemonic", "recover_seed",
    "master_seed", "account", "accounts", "address", "addresses",
)

log				= logging.getLogger( __package__ )


def produce_mnemonic(
    entropy: Optional[Union[bytes,str]] = None,
    strength: Optional[int]	= None,
    language: Optional[str]	= None,
) -> str:
    """Produce a BIP-39 Mnemonic phrase from the provided entropy (or generated, default 128 bits).

    All generated entropy comes from hdseed.bip39.RANDOM_BYTES, so it may be replaced in one place
    for testing, or to improve the entropy source.

    """
    if entropy:
        return Mnemonic.from_entropy( entropy, language=language ).phrase
    mnemonic_type		= MnemonicType.from_entropy_bits( strength or BITS_DEFAULT )
    return Mnemonic.generate( mnemonic_type, language=language ).phrase


def recover_mnemonic(
    mnemonic: str,
    language: Optional[str]	= None,   # If desired, provide language (eg. if only prefixes are provided)
) -> Mnemonic:
    """Normalize and validate a BIP-39 Mnemonic Phrase (which is often recovered as user input):

    - Removes excess whitespace and down-cases
    - Detects language if not provided
    - Expands unambiguous mnemonic prefixes (eg. 'ae' --> 'aerobic', 'acti' --> 'action')
    - Checks that the BIP-39 Phrase checksum is valid

    """
    mnemonic_stripped		= ' '.join( w.lower() for w in mnemonic.split() )
    if mnemonic_stripped != mnemonic:
        log.info( "BIP-39 Mnemonic Phrase stripped of unnecessary whitespace" )
    if not language:
        language		= detect_language( mnemonic_stripped )
        log.info( f"BIP-39 Language detected: {language}" )
    table			= wordtable( language )
    mnemonic_expanded		= ' '.join( table.expand( w ) for w in mnemonic_stripped.split() )
    if mnemonic_expanded != mnemonic_stripped:
        log.info( "BIP-39 Mnemonic Phrase prefixes expanded" )
    return Mnemonic.from_phrase( mnemonic_expanded, language=table.language )


def recover_seed(
    mnemonic: str,
    passphrase: Optional[Union[str,bytes]] = None,
    as_entropy: Optional[bool]	= None,   # Recover original 128- to 256-bit Entropy (not 512-bit Seed)
    language: Optional[str]	= None,
) -> bytes:
    """Recover the 512-bit BIP-39 seed (or the original Mnemonic entropy, if as_entropy) from a BIP-39
    Mnemonic Phrase.  Optionally provide a UTF-8 string or encoded passphrase; a passphrase cannot
    be used when recovering the original entropy.

    """
    if passphrase and as_entropy:
        raise ValueError( "When recovering original BIP-39 entropy, no passphrase may be specified" )
    m				= recover_mnemonic( mnemonic, language=language )
    if as_entropy:
        log.info( f"Recovered {len( m.entropy ) * 8}-bit BIP-39 entropy from {m.language} mnemonic" )
        return m.entropy
    if isinstance( passphrase, bytes ):
        passphrase		= passphrase.decode( 'UTF-8' )
    seed			= m.to_seed( passphrase or "" )
    log.info( f"Recovered {len( seed ) * 8}-bit BIP-39 seed from {m.language} mnemonic{' (and passphrase)' if passphrase else ''}" )
    return seed.to_bytes()


def master_seed(
    master_secret: Union[str,bytes,Seed],
    passphrase: Optional[Union[str,bytes]] = None,  # If a mnemonic is provided
) -> bytes:
    """Obtain the BIP-32 seed bytes from the supplied master_secret.

    If the master_secret is bytes (or a Seed), it is used as-is.  If a str of several whitespace-separated
    words, it must be a BIP-39 Mnemonic phrase; otherwise it must be hex (optionally 0x-prefixed).

    """
    if isinstance( master_secret, Seed ):
        return master_secret.to_bytes()
    if not isinstance( master_secret, str ):
        if passphrase:
            raise ValueError( "A passphrase may only be supplied with a BIP-39 mnemonic master secret" )
        return bytes( master_secret )
    master_secret		= master_secret.strip()
    if len( master_secret.split() ) > 1:
        # Some kind of Mnemonic; this is the only valid use of whitespace within a master_secret.  Any
        # Unicode whitespace separates words, eg. the ideographic space U+3000 used in Japanese.
        return recover_seed( master_secret, passphrase=passphrase )
    if master_secret and all( c in string.hexdigits for c in master_secret.lower().removeprefix( '0x' )):
        return into_bytes( master_secret )
    raise ValueError( f"Master secret must be a hex seed or a BIP-39 mnemonic; {master_secret[:4]+'...'!r} supplied" )


def account(
    master_secret: Union[str,bytes,Seed],
    path: Optional[str]		= None,  # default m/44'/60'/0'/0/0
    passphrase: Optional[Union[str,bytes]] = None,  # If a mnemonic is provided
) -> ExtendedKey:
    """Derive the HD wallet ExtendedKey from the supplied master_secret seed (or mnemonic), at the
    given derivation path.

    """
    seed			= master_seed( master_secret, passphrase=passphrase )
    path			= path or PATH_DEFAULT
    acct			= ExtendedKey.new_master( seed ).derive_path( path )
    log.debug( f"Created {acct.address} from {len( seed ) * 8}-bit seed, at derivation path {path}" )
    return acct


def accounts(
    master_secret: Union[str,bytes,Seed],
    paths: Optional[str]	= None,  # default m/44'/60'/0'/0/0; allow ranges
    allow_unbounded: bool	= True,
    passphrase: Optional[Union[str,bytes]] = None,
) -> Iterator[Tuple[str, ExtendedKey]]:
    """Derive (<path>, <ExtendedKey>) at the provided paths, allowing ranges, eg. "m/44'/60'/0'/0/0-9"
    or the unbounded "m/44'/60'/0'/0/-".  A mnemonic is stretched into its seed only once.

    """
    seed			= master_seed( master_secret, passphrase=passphrase )
    master			= ExtendedKey.new_master( seed )
    for path in path_sequence( *path_parser(
        paths		= paths or PATH_DEFAULT,
        allow_unbounded	= allow_unbounded,
    )):
        yield path, master.derive_path( path )


def address(
    master_secret: Union[str,bytes,Seed],
    path: Optional[str]		= None,
    passphrase: Optional[Union[str,bytes]] = None,
) -> str:
    """Return the Ethereum HD account address at path."""
    return account(
        master_secret,
        path		= path,
        passphrase	= passphrase,
    ).address


def addresses(
    master_secret: Union[str,bytes,Seed],
    paths: Optional[str]	= None,  # default m/44'/60'/0'/0/0; supports ranges
    allow_unbounded: bool	= True,
    passphrase: Optional[Union[str,bytes]] = None,
) -> Iterator[Tuple[str, str]]:
    """Generate a sequence of (<path>, <address>) for the account(s) at paths."""
    for path,acct in accounts(
            master_secret,
            paths	= paths,
            allow_unbounded = allow_unbounded,
            passphrase	= passphrase,
    ):
        yield path, acct.address
