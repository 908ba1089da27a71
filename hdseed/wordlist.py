
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

import bisect
import logging
import threading
import unicodedata

from typing		import Dict, Iterable, List, Optional, Sequence, Tuple

from mnemonic		import Mnemonic		# Only used as the source of the standard BIP-39 word tables

from .defaults		import LANGUAGE, WORDLIST_SIZE
from .util		import commas

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= (
    "MnemonicError", "InvalidWord", "WordTableError", "UnknownLanguage",
    "WordTable", "language_name", "languages", "register", "wordtable", "detect_language",
)

log				= logging.getLogger( __package__ )


class MnemonicError( ValueError ):
    pass


class InvalidWord( MnemonicError ):
    def __init__( self, word, language=None ):
        self.word		= word
        self.language		= language
        super().__init__( f"Invalid {language + ' ' if language else ''}mnemonic word {word!r}" )


class WordTableError( ValueError ):
    pass


class UnknownLanguage( ValueError ):
    pass


def normalize( text: str ) -> str:
    """BIP-39 phrases, words and passphrases are always compared and hashed in NFKD form."""
    return unicodedata.normalize( 'NFKD', text )


class WordTable:
    """An ordered BIP-39 vocabulary of exactly 2048 distinct words, and its inverse word --> index
    lookup.  Words are held in NFKD form, so phrases entered w/ differing Unicode representations of
    the same diacritics resolve to the same indices.  Immutable once loaded.

    We do not trust that a table is sorted; some (eg. japanese, chinese_*) are not.  Sortedness is
    determined once at load, and prefix searches use a binary search only where it is valid.

    """
    def __init__( self, language: str, words: Iterable[str] ):
        words			= tuple( normalize( w.strip() ) for w in words )
        if len( words ) != WORDLIST_SIZE:
            raise WordTableError( f"The {language} word table must contain {WORDLIST_SIZE} words, not {len( words )}" )
        index			= { w: i for i,w in enumerate( words ) }
        if len( index ) != len( words ):
            repeated		= sorted( set( w for w in words if words.index( w ) != index[w] ))
            raise WordTableError( f"The {language} word table contains repeated words: {commas( repeated )}" )
        self.language		= language
        self.words		= words
        self._index		= index
        self.sorted		= all( a < b for a,b in zip( words, words[1:] ))
        log.debug( f"Loaded {len( words )}-word {language} table ({'sorted' if self.sorted else 'unsorted'})" )

    def __len__( self ):
        return len( self.words )

    def __iter__( self ):
        return iter( self.words )

    def __contains__( self, word ):
        return normalize( word ) in self._index

    def __getitem__( self, index ):
        return self.word( index )

    def __repr__( self ):
        return f"{self.__class__.__name__}({self.language})"

    def word( self, index: int ) -> str:
        if not 0 <= index < len( self.words ):
            raise InvalidWord( f"#{index}", self.language )
        return self.words[index]

    def index( self, word: str ) -> int:
        try:
            return self._index[normalize( word )]
        except KeyError:
            raise InvalidWord( word, self.language ) from None

    def words_by_prefix( self, prefix: str ) -> Tuple[str, ...]:
        """All words beginning with prefix, in table order."""
        prefix			= normalize( prefix )
        if self.sorted:
            start		= bisect.bisect_left( self.words, prefix )
            end			= start
            while end < len( self.words ) and self.words[end].startswith( prefix ):
                end	       += 1
            return self.words[start:end]
        return tuple( w for w in self.words if w.startswith( prefix ))

    def expand( self, prefix: str ) -> str:
        """Expand an unambiguous prefix into its word; a complete word (or an ambiguous or
        unrecognized prefix) is returned unchanged.

        """
        prefix			= normalize( prefix )
        if prefix in self._index:
            return prefix
        matches			= self.words_by_prefix( prefix )
        if len( matches ) == 1:
            return matches[0]
        return prefix


#
# The language registry.  Any language python-mnemonic ships a standard BIP-39 word table for is
# available (loaded on first use); others may be registered at run-time.
#
_tables: Dict[str, WordTable]	= {}
_tables_lock			= threading.Lock()


def language_name( language: Optional[str] = None ) -> str:
    """Normalize a language identifier, eg. "Chinese Simplified" --> "chinese_simplified"."""
    if not language:
        return LANGUAGE
    return '_'.join( language.strip().lower().replace( '-', ' ' ).split() )


def languages() -> List[str]:
    """All known language identifiers; standard ones, and any registered."""
    with _tables_lock:
        registered		= set( _tables )
    return sorted( registered | set( Mnemonic.list_languages() ))


def register( language: str, words: Sequence[str] ) -> WordTable:
    """Validate and register a word table for the language, replacing any existing one."""
    language			= language_name( language )
    table			= WordTable( language, words )
    with _tables_lock:
        _tables[language]	= table
    log.info( f"Registered {language} word table" )
    return table


def wordtable( language: Optional[str] = None ) -> WordTable:
    """Return the (shared, read-only) word table for the language (default: english)."""
    language			= language_name( language )
    with _tables_lock:
        table			= _tables.get( language )
        if table is None:
            if language not in Mnemonic.list_languages():
                raise UnknownLanguage( f"No BIP-39 word table for {language!r}; specify one of {commas( languages_standard() )}" )
            table		= _tables[language] = WordTable( language, Mnemonic( language ).wordlist )
    return table


def languages_standard() -> List[str]:
    return sorted( Mnemonic.list_languages() )


def detect_language( phrase: str, candidates: Optional[Sequence[str]] = None ) -> str:
    """Find the one language whose word table contains every word of the phrase.  If no language
    contains every complete word, accept a language where every word is a complete word or an
    unambiguous prefix.  Several languages share some words (eg. english and french both contain
    "abandon"), so every word of the phrase is considered.

    """
    words			= normalize( phrase ).split()
    if not words:
        raise MnemonicError( "Cannot detect the language of an empty mnemonic phrase" )
    exact, prefixed		= [], []
    for language in candidates or languages():
        table			= wordtable( language )
        if all( w in table for w in words ):
            exact.append( table.language )
        elif all( table.expand( w ) in table for w in words ):
            prefixed.append( table.language )
    for found in ( exact, prefixed ):
        if len( found ) == 1:
            return found[0]
        if found:
            raise MnemonicError( f"Mnemonic phrase language is ambiguous; could be {commas( found, final='or' )}" )
    raise MnemonicError( f"Mnemonic phrase matches no known language; tried {commas( candidates or languages() )}" )
