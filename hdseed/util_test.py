import pytest

from .util		import ordinal, commas, into_bytes, bits_from_bytes, bits_into_values


def test_ordinal():
    assert [ ordinal( n ) for n in ( 1, 2, 3, 4, 11, 12, 13, 21, 22, 101, 111 ) ] == [
        '1st', '2nd', '3rd', '4th', '11th', '12th', '13th', '21st', '22nd', '101st', '111th'
    ]


def test_commas():
    assert commas( [ 1, 2, 3, 5, 7 ] ) == "1-3, 5, 7"
    assert commas( [ 1, 2, 3, 5, 7 ], final='and' ) == "1-3, 5 and 7"
    assert commas( [ 16, 32, 64 ], final='or' ) == "16, 32 or 64"
    assert commas( [ 'english', 'french' ], final='or' ) == "english or french"
    assert commas( [ 'one' ], final='or' ) == "one"


def test_into_bytes():
    assert into_bytes( b'\x01\x02' ) == b'\x01\x02'
    assert into_bytes( bytearray( b'\xff' )) == b'\xff'
    assert into_bytes( "0102" ) == b'\x01\x02'
    assert into_bytes( " 0xFF00\n" ) == b'\xff\x00'
    with pytest.raises( ValueError ):
        into_bytes( "xyz" )


def test_bits():
    assert list( bits_from_bytes( b'\x80\x01' )) == [1,0,0,0,0,0,0,0, 0,0,0,0,0,0,0,1]
    assert list( bits_from_bytes( [ 2047, 0 ], width=11 )) == [1] * 11 + [0] * 11
    # 11-bit values --> bytes; the trailing 6 bits are discarded
    assert bytes( bits_into_values( bits_from_bytes( [ 2047, 0 ], width=11 ))) == b'\xff\xe0'
    # bytes --> 11-bit values; the trailing 5 bits are discarded
    assert list( bits_into_values( bits_from_bytes( b'\xff\xff' ), width=11 )) == [ 2047 ]
    assert list( bits_into_values( [] )) == []
