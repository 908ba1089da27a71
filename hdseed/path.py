
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

import itertools
import re

from dataclasses	import dataclass
from typing		import Callable, Dict, Iterable, Tuple, Union

from .defaults		import HARDENED, PATH_ACCOUNT_DEFAULT
from .util		import ordinal

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "PathError", "EmptyPath", "ChildNumber", "DerivationPath",
    "path_parser", "path_sequence",
)

# A path segment: a decimal index, optionally marked hardened w/ ', h or H
SEGMENT_RE			= re.compile( r"^([0-9]+)(['hH]?)$" )


class PathError( ValueError ):
    pass


class EmptyPath( PathError ):
    def __init__( self, path ):
        self.path		= path
        super().__init__( f"Derivation path {path!r} contains no path segments" )


@dataclass( eq=True, frozen=True )
class ChildNumber:
    """A BIP-32 child number; a 31-bit index, w/ the top bit of its 32-bit value set if hardened."""
    value: int

    def __post_init__( self ):
        if not 0 <= self.value < 2 * HARDENED:
            raise PathError( f"Child number {self.value} is not a 32-bit value" )

    @classmethod
    def hardened( cls, index: int ) -> ChildNumber:
        if not 0 <= index < HARDENED:
            raise PathError( f"Hardened child index {index} must be in the range [0,2^31)" )
        return cls( index | HARDENED )

    @classmethod
    def normal( cls, index: int ) -> ChildNumber:
        if not 0 <= index < HARDENED:
            raise PathError( f"Child index {index} must be in the range [0,2^31)" )
        return cls( index )

    @classmethod
    def parse( cls, segment: str ) -> ChildNumber:
        """Parse a path segment eg. "44'", "44h" or "0"."""
        match			= SEGMENT_RE.match( segment.strip() )
        if not match:
            raise PathError( f"Invalid derivation path segment {segment!r}" )
        digits,tic		= match.groups()
        index			= int( digits )
        return cls.hardened( index ) if tic else cls.normal( index )

    @property
    def is_hardened( self ) -> bool:
        return bool( self.value & HARDENED )

    @property
    def index( self ) -> int:
        return self.value & ~HARDENED

    def to_bytes( self ) -> bytes:
        return self.value.to_bytes( 4, 'big' )

    def __int__( self ):
        return self.value

    def __str__( self ):
        return str( self.index ) + ( "'" if self.is_hardened else "" )


@dataclass( eq=True, frozen=True )
class DerivationPath:
    """An ordered sequence of ChildNumbers, from the master (root) node.  Canonically rendered as eg.
    "m/44'/60'/0'/0/0"; on input the "m/" prefix is optional, and h or H may mark hardened segments.

    """
    components: Tuple[ChildNumber, ...] = ()

    @classmethod
    def parse( cls, path: str ) -> DerivationPath:
        segs			= path.strip().split( '/' )
        if segs[0] == 'm':
            segs		= segs[1:]
        if segs == [] or segs == ['']:
            raise EmptyPath( path )
        try:
            components		= tuple( ChildNumber.parse( s ) for s in segs )
        except PathError as exc:
            raise PathError( f"Invalid derivation path {path!r}: {exc}" ) from exc
        return cls( components )

    @classmethod
    def default( cls ) -> DerivationPath:
        """The Ethereum BIP-44 account path, m/44'/60'/0'/0."""
        return cls.parse( PATH_ACCOUNT_DEFAULT )

    @classmethod
    def from_components( cls, components: Iterable[Union[ChildNumber,int]] ) -> DerivationPath:
        return cls( tuple(
            c if isinstance( c, ChildNumber ) else ChildNumber( c )
            for c in components
        ))

    def child( self, child_number: Union[ChildNumber,int] ) -> DerivationPath:
        if not isinstance( child_number, ChildNumber ):
            child_number	= ChildNumber( child_number )
        return self.__class__( self.components + ( child_number, ))

    def to_bytes( self ) -> bytes:
        return b''.join( c.to_bytes() for c in self.components )

    def __iter__( self ):
        return iter( self.components )

    def __len__( self ):
        return len( self.components )

    def __getitem__( self, index ):
        return self.components[index]

    def __str__( self ):
        return '/'.join( [ 'm' ] + [ str( c ) for c in self.components ] )


#
# Path string utilities; these operate on path text (possibly containing ranges), before parsing.
#
def path_parser(
    paths: str,
    allow_unbounded: bool	= True,
) -> Tuple[str, Dict[str, Callable[[], Iterable[int]]]]:
    """Create a format and a dictionary of iterator factories to feed into it, from a path w/ range
    segments eg. "m/44'/60'/0'/0-1/-" (the 4th segment 0 to 1, the last 0 onward).

        >>> path_parser( "m/0'/1-2" )[0]
        "m/0'/{c}"

    """
    path_segs			= paths.split( '/' )
    unbounded			= False
    ranges			= {}

    for i,s in list( enumerate( path_segs )):
        if '-' not in s:
            continue
        c			= chr(ord('a')+i)
        tic			= s[-1:] if s[-1:] in ( "'", "h", "H" ) else ""
        if tic:
            s			= s[:-1]
        try:
            b,e			= s.split( '-' )
            b			= int( b or 0 )
            e			= int( e ) if e else None
        except ValueError as exc:
            raise PathError( f"Invalid {ordinal(i)} range segment {path_segs[i]!r} in {paths}" ) from exc
        if e is not None:
            ranges[c]		= lambda b=b,e=e: range( b, e+1 )
        else:
            if not allow_unbounded or unbounded or ranges:
                raise PathError(
                    f"{'Only the first' if allow_unbounded else 'No'} range may be unbounded;"
                    f" this is the {ordinal(len(ranges)+1)} range in {paths}" )
            unbounded		= True
            ranges[c]		= lambda b=b: itertools.count( b )
        path_segs[i]		= f"{{{c}}}{tic}"

    return '/'.join( path_segs ), ranges


def path_sequence(
    path_fmt: str,
    ranges: Dict[str, Callable[[], Iterable[int]]],
):
    """Yield a sequence of paths, modulating the format specifiers of the path_fmt according to their
    value sources in ranges, the last varying fastest.  For example:

        path_fmt = "m/44'/60'/0'/0/{f}", with
        ranges   = dict( f=lambda b=0, e=2: range( b, e+1 ) )

    yields "m/44'/60'/0'/0/0", "m/44'/60'/0'/0/1" and "m/44'/60'/0'/0/2".

    """
    viters			= {
        k: iter( l() )
        for k,l in ranges.items()
    }
    values			= {
        k: next( viters[k], None )
        for k in viters
    }
    while not any( v is None for v in values.values() ):
        yield path_fmt.format( **values )
        if not ranges:
            break				# No ranges; just the one path
        # Advance the last iterator; when exhausted, restart it and advance the next one up
        for i,k in enumerate( sorted( viters.keys(), reverse=True )):
            values[k]		= next( viters[k], None )
            if values[k] is not None:
                break
            if i+1 < len( ranges ):
                viters[k]	= iter( ranges[k]() )
                values[k]	= next( viters[k], None )
