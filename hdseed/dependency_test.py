import contextlib

from .bip39		import Mnemonic

BIP39_ABANDON			= "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
BIP39_ZOO			= "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong"

SEED_ABANDON_HEX		= "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc19a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
SEED_ZERO			= b'\0' * 16
SEED_ONES			= b'\xff' * 16


class substitute( contextlib.ContextDecorator ):
    """Replace an attribute (eg. the RANDOM_BYTES entropy source) during a test, to get determinism
    in resultant mnemonics.

    """
    def __init__( self, thing, attribute, value ):
        self.thing		= thing
        self.attribute		= attribute
        self.value		= value
        self.saved		= None

    def __enter__( self ):
        self.saved		= getattr( self.thing, self.attribute )
        setattr( self.thing, self.attribute, self.value )

    def __exit__( self, *exc ):
        setattr( self.thing, self.attribute, self.saved )


def nonrandom_bytes( n ):
    return b'\0' * n


def test_substitute():
    from . import bip39
    with substitute( bip39, 'RANDOM_BYTES', nonrandom_bytes ):
        assert Mnemonic.generate().phrase == BIP39_ABANDON
    assert bip39.RANDOM_BYTES is not nonrandom_bytes
