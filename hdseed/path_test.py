import itertools

import pytest

from .path		import (
    ChildNumber, DerivationPath, PathError, EmptyPath,
    path_parser, path_sequence,
)


def test_child_number():
    c				= ChildNumber.hardened( 44 )
    assert c.is_hardened
    assert c.index == 44
    assert int( c ) == 0x8000002C
    assert c.to_bytes() == b'\x80\x00\x00\x2c'
    assert str( c ) == "44'"
    assert c == ChildNumber( 0x8000002C ) == ChildNumber.parse( "44h" ) == ChildNumber.parse( "44H" )

    n				= ChildNumber.normal( 7 )
    assert not n.is_hardened
    assert n.index == 7
    assert str( n ) == "7"
    assert n.to_bytes() == b'\x00\x00\x00\x07'
    assert n == ChildNumber( 7 ) == ChildNumber.parse( "7" )
    assert n != ChildNumber.hardened( 7 )

    assert str( ChildNumber.hardened( 2**31 - 1 )) == "2147483647'"
    for bad in ( -1, 2**31 ):
        with pytest.raises( PathError ):
            ChildNumber.hardened( bad )
        with pytest.raises( PathError ):
            ChildNumber.normal( bad )
    with pytest.raises( PathError ):
        ChildNumber( 2**32 )


def test_derivation_path_parse():
    p				= DerivationPath.parse( "m/44'/60'/0'/0/0" )
    assert len( p ) == 5
    assert str( p ) == "m/44'/60'/0'/0/0"
    assert [ c.is_hardened for c in p ] == [ True, True, True, False, False ]
    assert p[0] == ChildNumber.hardened( 44 )
    assert p[-1] == ChildNumber.normal( 0 )
    assert p.to_bytes() == bytes.fromhex( "8000002c" "8000003c" "80000000" "00000000" "00000000" )

    # Canonical form is restored; the m/ prefix is optional, and h/H mark hardened segments
    for path in ( "m/44h/60H/0'/0/0", "44'/60'/0'/0/0", " m/44'/60'/0'/0/0\n" ):
        assert str( DerivationPath.parse( path )) == "m/44'/60'/0'/0/0"
    assert DerivationPath.parse( "44h/60H/0'/0/0" ) == p
    assert str( DerivationPath.parse( "m/2147483647'" )) == "m/2147483647'"


def test_derivation_path_invalid():
    for empty in ( "", "m", "m/", "  " ):
        with pytest.raises( EmptyPath ):
            DerivationPath.parse( empty )
    for bad in ( "m/abc", "m/2147483648", "m/2147483648'", "m/-1", "m//0", "m/0/", "m/0''", "n/0", "m/1x", "/0" ):
        with pytest.raises( PathError ) as exc:
            DerivationPath.parse( bad )
        assert not isinstance( exc.value, EmptyPath ), \
            f"{bad!r} should not be an empty path"
    assert issubclass( EmptyPath, PathError )
    assert issubclass( PathError, ValueError )


def test_derivation_path_default():
    assert str( DerivationPath.default() ) == "m/44'/60'/0'/0"
    p				= DerivationPath.default().child( 3 )
    assert str( p ) == "m/44'/60'/0'/0/3"
    assert str( DerivationPath() ) == "m"
    assert str( DerivationPath.from_components( [ 0x80000000, ChildNumber.normal( 1 ) ] )) == "m/0'/1"


def test_path_ranges():
    fmt,ranges			= path_parser( "m/44'/60'/0'/0/0-2" )
    assert fmt == "m/44'/60'/0'/0/{f}"
    assert list( path_sequence( fmt, ranges )) == [
        "m/44'/60'/0'/0/0",
        "m/44'/60'/0'/0/1",
        "m/44'/60'/0'/0/2",
    ]
    assert list( path_sequence( *path_parser( "m/0-1'/2-3" ))) == [
        "m/0'/2", "m/0'/3", "m/1'/2", "m/1'/3",
    ]
    assert list( path_sequence( *path_parser( "m/44'/60'/0'/0/0" ))) == [ "m/44'/60'/0'/0/0" ]
    assert list( itertools.islice( path_sequence( *path_parser( "m/0/-" )), 3 )) == [
        "m/0/0", "m/0/1", "m/0/2",
    ]
    with pytest.raises( PathError ):
        path_parser( "m/0/-", allow_unbounded=False )
    with pytest.raises( PathError ):
        path_parser( "m/0-1/-" )
    # Malformed range segments are path errors, not bare int conversion failures
    for bad in ( "m/a-1", "m/0-x", "m/0-1-2", "m/0-1''" ):
        with pytest.raises( PathError ):
            path_parser( bad )
    # Every generated path parses
    for path in path_sequence( *path_parser( "m/1-2h/3-4" )):
        DerivationPath.parse( path )
