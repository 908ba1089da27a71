
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

from typing		import Union

import coincurve

from .hashes		import keccak256
from .util		import into_bytes

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "PrivateKey", "PublicKey", "InvalidKeyError", "SECP256K1_ORDER" )

log				= logging.getLogger( __package__ )

# The secp256k1 curve order 'n'; every valid private key scalar is in [1,n)
SECP256K1_ORDER			= 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


class InvalidKeyError( ValueError ):
    pass


class PublicKey:
    """A secp256k1 public key (curve point).  Serializes to 33-byte compressed form by default, which
    is the form BIP-32 uses for non-hardened derivation and fingerprints.

    """
    def __init__( self, data: Union[bytes,str,coincurve.PublicKey] ):
        if isinstance( data, coincurve.PublicKey ):
            self._key		= data
        else:
            data		= into_bytes( data )
            try:
                self._key	= coincurve.PublicKey( data )
            except ValueError as exc:
                raise InvalidKeyError( f"Invalid {len(data)}-byte secp256k1 public key: {exc}" ) from exc

    def to_bytes( self, compressed: bool = True ) -> bytes:
        return self._key.format( compressed=compressed )

    def address( self ) -> str:
        """The EIP-55 mixed-case checksummed Ethereum address: the last 20 bytes of the Keccak-256
        hash of the uncompressed public key's X,Y coordinates (w/o its 0x04 prefix).

        """
        hexaddr			= keccak256( self.to_bytes( compressed=False )[1:] )[-20:].hex()
        checksum		= keccak256( hexaddr.encode( 'ascii' )).hex()
        return '0x' + ''.join(
            c.upper() if int( h, 16 ) >= 8 else c
            for c,h in zip( hexaddr, checksum )
        )

    def __eq__( self, other ):
        if not isinstance( other, PublicKey ):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__( self ):
        return hash( self.to_bytes() )

    def __str__( self ):
        return self.to_bytes().hex()

    def __repr__( self ):
        return f"{self.__class__.__name__}({self})"


class PrivateKey:
    """A secp256k1 private key scalar, in the range [1,n)."""
    def __init__( self, secret: Union[bytes,str] ):
        secret			= into_bytes( secret )
        if len( secret ) != 32:
            raise InvalidKeyError( f"A secp256k1 private key must be 32 bytes, not {len( secret )}" )
        if not 0 < int.from_bytes( secret, 'big' ) < SECP256K1_ORDER:
            raise InvalidKeyError( "A secp256k1 private key must be in the range [1,n)" )
        self._key		= coincurve.PrivateKey( secret )

    @classmethod
    def from_hex( cls, secret: str ) -> PrivateKey:
        return cls( into_bytes( secret ))

    def public_key( self ) -> PublicKey:
        return PublicKey( self._key.public_key )

    def derive_child( self, tweak: bytes ) -> PrivateKey:
        """Returns a new PrivateKey: ( self + tweak ) mod n.  A tweak >= n, or a zero result, is an
        invalid derivation (with probability ~1 in 2^127); BIP-32 requires that the caller proceed
        with the next child index.

        """
        if len( tweak ) != 32:
            raise InvalidKeyError( f"A private key tweak must be 32 bytes, not {len( tweak )}" )
        if int.from_bytes( tweak, 'big' ) >= SECP256K1_ORDER:
            raise InvalidKeyError( "Private key tweak exceeds the secp256k1 curve order" )
        try:
            child		= self._key.add( tweak )
        except ValueError as exc:
            raise InvalidKeyError( f"Private key tweak yields an invalid child key: {exc}" ) from exc
        return PrivateKey( child.secret )

    def to_bytes( self ) -> bytes:
        return self._key.secret

    def __eq__( self, other ):
        if not isinstance( other, PrivateKey ):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__( self ):
        return hash( self.to_bytes() )

    def __str__( self ):
        return self.to_bytes().hex()

    def __repr__( self ):
        # Never reveal the secret in logs or tracebacks
        return f"{self.__class__.__name__}({self.public_key()})"
