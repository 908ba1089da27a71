
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
import secrets

from dataclasses	import dataclass
from enum		import Enum
from typing		import Optional, Union

from .defaults		import (
    BITS_BIP39, WORDS_BIP39, RADIX_BITS, PBKDF2_ROUNDS, PBKDF2_SALT, SEED_BYTES,
)
from .hashes		import sha256, pbkdf2_hmac_sha512
from .util		import into_bytes, bits_from_bytes, bits_into_values
from .wordlist		import MnemonicError, InvalidWord, normalize, wordtable, language_name

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "MnemonicError", "InvalidMnemonicLength", "InvalidChecksum", "InvalidWord",
    "MnemonicType", "Mnemonic", "Seed", "RANDOM_BYTES",
)

log				= logging.getLogger( __package__ )

# All Mnemonic entropy is obtained here, so that it can be replaced in one place (eg. for testing)
RANDOM_BYTES			= secrets.token_bytes


class InvalidMnemonicLength( MnemonicError ):
    def __init__( self, length, what="words" ):
        self.length		= length
        super().__init__( f"Invalid mnemonic length: {length} {what}" )


class InvalidChecksum( MnemonicError ):
    def __init__( self ):
        super().__init__( "Invalid mnemonic checksum" )


class MnemonicType( Enum ):
    """The 5 standard BIP-39 Mnemonic sizes, by word count.  Every 32 bits of entropy carries 1 bit
    of checksum, and every 11 bits of entropy + checksum encodes one word:

    | Words | Entropy | Checksum | Total |
    |-------+---------+----------+-------|
    |    12 |     128 |        4 |   132 |
    |    15 |     160 |        5 |   165 |
    |    18 |     192 |        6 |   198 |
    |    21 |     224 |        7 |   231 |
    |    24 |     256 |        8 |   264 |

    """
    Words12			= 12
    Words15			= 15
    Words18			= 18
    Words21			= 21
    Words24			= 24

    @classmethod
    def from_word_count( cls, words: int ) -> MnemonicType:
        if words not in WORDS_BIP39:
            raise InvalidMnemonicLength( words )
        return cls( words )

    @classmethod
    def from_entropy_bits( cls, bits: int ) -> MnemonicType:
        if bits not in BITS_BIP39:
            raise InvalidMnemonicLength( bits, what="bits of entropy" )
        return cls( bits // 32 * 3 )

    @property
    def word_count( self ) -> int:
        return self.value

    @property
    def entropy_bits( self ) -> int:
        return BITS_BIP39[WORDS_BIP39.index( self.value )]

    @property
    def checksum_bits( self ) -> int:
        return self.entropy_bits // 32

    @property
    def total_bits( self ) -> int:
        return self.entropy_bits + self.checksum_bits


def entropy_to_indices( entropy: bytes ):
    """Yield the 11-bit word indices encoding the entropy, followed by its checksum.  The entire first
    byte of SHA-256( entropy ) is appended, but only its leading entropy_bits/32 bits complete the
    final 11-bit group; the remainder is discarded.

    """
    checksum			= sha256( entropy )[0]
    return bits_into_values( bits_from_bytes( entropy + bytes( [checksum] )), width=RADIX_BITS )


def indices_to_entropy( indices ) -> bytes:
    """Recover and confirm the entropy from a complete sequence of 11-bit word indices."""
    mnemonic_type		= MnemonicType.from_word_count( len( indices ))
    data			= bytes( bits_into_values( bits_from_bytes( indices, width=RADIX_BITS )))
    # All 5 sizes contain entropy_bits/8 whole bytes of entropy, followed by a final partial
    # byte containing only the checksum_bits; bits_into_values discards it, so get it directly.
    entropy			= data[:mnemonic_type.entropy_bits // 8]
    checksum			= indices[-1] & (( 1 << mnemonic_type.checksum_bits ) - 1 )
    expected			= sha256( entropy )[0] >> ( 8 - mnemonic_type.checksum_bits )
    if checksum != expected:
        raise InvalidChecksum()
    return entropy


@dataclass( eq=True, frozen=True )
class Mnemonic:
    """A BIP-39 Mnemonic: a language, its entropy, and the canonical phrase encoding that entropy.

    Usually created via .generate, .from_entropy or .from_phrase.  A Mnemonic constructed directly
    must still supply the exact single-spaced phrase encoding its entropy, or a MnemonicError is
    raised.

    """
    language: str
    entropy: bytes
    phrase: str

    def __post_init__( self ):
        MnemonicType.from_entropy_bits( len( self.entropy ) * 8 )
        table			= wordtable( self.language )
        if self.phrase != ' '.join( table.word( i ) for i in entropy_to_indices( self.entropy )):
            raise MnemonicError( f"Mnemonic phrase is not the {table.language} encoding of its {len( self.entropy ) * 8}-bit entropy" )

    @classmethod
    def generate(
        cls,
        mnemonic_type: Union[MnemonicType,int] = MnemonicType.Words12,
        language: Optional[str]	= None,
    ) -> Mnemonic:
        """Generate a new random Mnemonic of the given type (or word count)."""
        if not isinstance( mnemonic_type, MnemonicType ):
            mnemonic_type	= MnemonicType.from_word_count( mnemonic_type )
        return cls.from_entropy( RANDOM_BYTES( mnemonic_type.entropy_bits // 8 ), language=language )

    @classmethod
    def from_entropy(
        cls,
        entropy: Union[bytes,str],
        language: Optional[str]	= None,
    ) -> Mnemonic:
        """Encode the supplied 128- to 256-bit (hex or bytes) entropy as a Mnemonic phrase."""
        entropy			= into_bytes( entropy )
        MnemonicType.from_entropy_bits( len( entropy ) * 8 )
        table			= wordtable( language )
        phrase			= ' '.join( table.word( i ) for i in entropy_to_indices( entropy ))
        return cls( language=table.language, entropy=entropy, phrase=phrase )

    @classmethod
    def from_phrase(
        cls,
        phrase: str,
        language: Optional[str]	= None,
    ) -> Mnemonic:
        """Decode and validate a Mnemonic phrase, recovering its entropy.  The phrase is normalized
        (NFKD) and re-joined w/ single spaces.

        """
        table			= wordtable( language )
        words			= normalize( phrase ).split()
        entropy			= indices_to_entropy( [ table.index( w ) for w in words ] )
        return cls( language=table.language, entropy=entropy, phrase=' '.join( words ))

    @classmethod
    def validate_phrase(
        cls,
        phrase: str,
        language: Optional[str]	= None,
    ) -> None:
        """Raises a MnemonicError (InvalidWord, InvalidMnemonicLength or InvalidChecksum) if the
        phrase is not a valid Mnemonic in the language.

        """
        cls.from_phrase( phrase, language=language )

    @classmethod
    def is_valid(
        cls,
        phrase: str,
        language: Optional[str]	= None,
    ) -> bool:
        try:
            cls.validate_phrase( phrase, language=language )
        except MnemonicError as exc:
            log.debug( f"Invalid {language_name( language )} mnemonic: {exc}" )
            return False
        return True

    @property
    def mnemonic_type( self ) -> MnemonicType:
        return MnemonicType.from_entropy_bits( len( self.entropy ) * 8 )

    @property
    def words( self ):
        return self.phrase.split( ' ' )

    def to_bytes( self ) -> bytes:
        return self.phrase.encode( 'UTF-8' )

    def to_seed( self, passphrase: str = "" ) -> Seed:
        return Seed.from_mnemonic( self, passphrase=passphrase )

    def __str__( self ):
        return self.phrase

    def __repr__( self ):
        # Never reveal the phrase in logs or tracebacks
        return f"{self.__class__.__name__}({self.language}, {len( self.words )} words)"


@dataclass( eq=True, frozen=True )
class Seed:
    """An opaque BIP-39 Seed; 512 bits stretched from a Mnemonic phrase and passphrase, or supplied."""
    seed: bytes

    @classmethod
    def from_mnemonic(
        cls,
        mnemonic: Union[Mnemonic,str],
        passphrase: Optional[str] = None,
    ) -> Seed:
        """Stretch the UTF-8 phrase w/ PBKDF2-HMAC-SHA512, salted with "mnemonic" + passphrase.  No
        check of the phrase is done here; only a validated Mnemonic should be supplied.

        """
        if isinstance( mnemonic, Mnemonic ):
            password		= mnemonic.to_bytes()
        else:
            password		= normalize( mnemonic ).encode( 'UTF-8' )
        salt			= normalize( PBKDF2_SALT + ( passphrase or "" )).encode( 'UTF-8' )
        return cls( pbkdf2_hmac_sha512( password, salt, PBKDF2_ROUNDS, SEED_BYTES ))

    @classmethod
    def from_hex( cls, seed: str ) -> Seed:
        return cls( into_bytes( seed ))

    def to_bytes( self ) -> bytes:
        return self.seed

    def __len__( self ):
        return len( self.seed )

    def __bytes__( self ):
        return self.seed

    def __str__( self ):
        return self.seed.hex()

    def __repr__( self ):
        return f"{self.__class__.__name__}({len( self.seed ) * 8} bits)"
