
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

from typing		import Union


__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"


def ordinal( num ):
    ordinal_dict		= {1: "st", 2: "nd", 3: "rd"}
    q, mod			= divmod( num, 10 )
    suffix			= q % 10 != 1 and ordinal_dict.get(mod) or "th"
    return f"{num}{suffix}"


def commas( seq, final=None ):  # supply alternative final connector, eg. 'and', 'or'
    """Replace any numeric sequences eg. 1, 2, 3, 5, 7 w/ 1-3, 5 and 7.  Caller should
    usually sort numeric values before calling."""
    def int_seq( seq ):
        for i,iv in enumerate( seq[:-1] ):
            if type(iv) in (int,float):
                for j,jv in enumerate( seq[i:] ):
                    if type(jv) not in (int,float) or jv != iv + j:
                        j      -= 1
                        break
                if j > 1:
                    return (i,i+j)
        return None
    seq				= list( seq )
    while rng := int_seq( seq ):
        beg			= seq[:rng[0]]
        nxt			= rng[1] + 1
        end			= seq[nxt:] if nxt < len( seq ) else []
        seq			= beg + [f"{seq[rng[0]]}-{seq[rng[1]]}"] + end
    if final and len(seq) > 1:
        seq			= seq[:-2] + [f"{seq[-2]} {final} {seq[-1]}"]
    return ', '.join( map( str, seq ))


def into_bytes( data: Union[bytes,bytearray,str] ) -> bytes:
    """Convert hex data w/ optional '0x' prefix into bytes"""
    if isinstance( data, (bytes,bytearray) ):
        return bytes( data )
    data			= data.strip()
    if data[:2].lower() == '0x':
        data		= data[2:]
    return bytes.fromhex( data )


def bits_from_bytes( data: bytes, width: int = 8 ):
    """Yield the bits of data, most-significant bit first, as a sequence of 0/1 ints.  Only the low
    'width' bits of each element are used, so a sequence of 11-bit word indices may be supplied.

        >>> list( bits_from_bytes( b'\\xa0' ))
        [1, 0, 1, 0, 0, 0, 0, 0]
        >>> list( bits_from_bytes( [5], width=3 ))
        [1, 0, 1]
    """
    for value in data:
        for i in range( width - 1, -1, -1 ):
            yield ( value >> i ) & 1


def bits_into_values( bits, width: int = 8 ):
    """Pack a sequence of 0/1 bits, most-significant first, into consecutive 'width'-bit values.  Any
    trailing group shorter than 'width' bits is discarded.

        >>> list( bits_into_values( [1, 0, 1, 0, 0, 0, 0, 0, 1, 1] ))
        [160]
        >>> list( bits_into_values( [1, 0, 1, 1], width=2 ))
        [2, 3]
    """
    value, count		= 0, 0
    for bit in bits:
        value			= ( value << 1 ) | bit
        count		       += 1
        if count == width:
            yield value
            value, count	= 0, 0
