import mnemonic
import pytest

from eth_account	import Account

from .			import bip39
from .api		import produce_mnemonic, recover_mnemonic, recover_seed, master_seed, account, accounts, address, addresses
from .bip39		import Mnemonic, Seed, InvalidChecksum
from .dependency_test	import substitute, nonrandom_bytes, BIP39_ABANDON, BIP39_ZOO, SEED_ABANDON_HEX, SEED_ONES

ADDRESS_ABANDON			= "0x9858EfFD232B4033E47d90003D41EC34EcaEda94"

Account.enable_unaudited_hdwallet_features()


@substitute( bip39, 'RANDOM_BYTES', nonrandom_bytes )
def test_produce_mnemonic():
    assert produce_mnemonic() == BIP39_ABANDON
    assert produce_mnemonic( strength=256 ) == ' '.join( [ 'abandon' ] * 23 + [ 'art' ] )
    assert produce_mnemonic( SEED_ONES ) == BIP39_ZOO
    assert produce_mnemonic( "ff" * 16 ) == BIP39_ZOO
    assert produce_mnemonic( language='french' ).split()[0] == 'abaisser'
    with pytest.raises( ValueError ):
        produce_mnemonic( strength=129 )


def test_recover_mnemonic():
    m				= recover_mnemonic( "  Abandon ABANDON abandon abandon abandon abandon\n abandon abandon abandon abandon abandon About \n" )
    assert isinstance( m, Mnemonic )
    assert m.phrase == BIP39_ABANDON
    assert m.language == 'english'

    # Unambiguous prefixes are expanded; the language must be supplied if prefixes could be french
    prefixes			= "aban aban aban aban aban aban aban aban aban aban aban abou"
    assert recover_mnemonic( prefixes, language='english' ).phrase == BIP39_ABANDON

    with pytest.raises( InvalidChecksum ):
        recover_mnemonic( ' '.join( [ 'abandon' ] * 12 ), language='english' )
    with pytest.raises( ValueError ):
        recover_mnemonic( "xyzzy " * 12 )


def test_recover_seed():
    assert recover_seed( BIP39_ABANDON ).hex() == SEED_ABANDON_HEX
    assert recover_seed( BIP39_ABANDON, passphrase="" ).hex() == SEED_ABANDON_HEX
    assert recover_seed( BIP39_ABANDON, passphrase="TREZOR" ).hex() \
        == "c55257c360c07c72029aebc1b53c05ed0362ada38ead3e3e9efa3708e53495531f09a6987599d18264c1e1c92f2cf141630c7a3c4ab7c81b2f001698e7463b04"
    assert recover_seed( BIP39_ABANDON, passphrase=b"TREZOR" ) == recover_seed( BIP39_ABANDON, passphrase="TREZOR" )
    assert recover_seed( BIP39_ABANDON, as_entropy=True ) == bytes( 16 )
    assert recover_seed( BIP39_ZOO, as_entropy=True ) == SEED_ONES
    with pytest.raises( ValueError ):
        recover_seed( BIP39_ABANDON, passphrase="TREZOR", as_entropy=True )


def test_master_seed():
    seed			= bytes.fromhex( SEED_ABANDON_HEX )
    assert master_seed( seed ) == seed
    assert master_seed( Seed( seed )) == seed
    assert master_seed( SEED_ABANDON_HEX ) == seed
    assert master_seed( "0x" + SEED_ABANDON_HEX ) == seed
    assert master_seed( BIP39_ABANDON ) == seed
    assert master_seed( BIP39_ABANDON, passphrase="TREZOR" ) != seed
    with pytest.raises( ValueError ):
        master_seed( "xprv9s21ZrQH143K" )
    with pytest.raises( ValueError ):
        master_seed( seed, passphrase="TREZOR" )

    # Japanese phrases separate words w/ the ideographic space U+3000, not an ASCII space
    phrase			= mnemonic.Mnemonic( 'japanese' ).to_mnemonic( bytes( 16 ))
    assert ' ' not in phrase and '\u3000' in phrase
    seed_jp			= mnemonic.Mnemonic.to_seed( phrase )
    assert master_seed( phrase ) == recover_seed( phrase, language='japanese' ) == seed_jp
    assert account( phrase ).address == address( phrase ) == account( seed_jp ).address


def test_account():
    acct			= account( BIP39_ABANDON )
    assert acct.address == ADDRESS_ABANDON
    assert str( acct.private_key ) == "1ab42cc412b618bdea3a599e3c9bae199ebf030895b039e9db1e30dafb12b727"
    assert account( SEED_ABANDON_HEX ) == acct
    assert account( bytes.fromhex( SEED_ABANDON_HEX ), path="m/44'/60'/0'/0/0" ) == acct
    assert address( BIP39_ABANDON ) == ADDRESS_ABANDON

    for path in ( "m/44'/60'/0'/0/1", "m/44'/60'/1'/0/0" ):
        for passphrase in ( "", "TREZOR" ):
            expected		= Account.from_mnemonic( BIP39_ABANDON, passphrase=passphrase, account_path=path )
            acct		= account( BIP39_ABANDON, path=path, passphrase=passphrase )
            assert acct.address == expected.address
            assert acct.private_key.to_bytes() == bytes( expected.key )


def test_accounts():
    paths_accts			= list( accounts( BIP39_ABANDON, paths="m/44'/60'/0'/0/0-2" ))
    assert [ p for p,_ in paths_accts ] == [
        "m/44'/60'/0'/0/0",
        "m/44'/60'/0'/0/1",
        "m/44'/60'/0'/0/2",
    ]
    assert paths_accts[0][1].address == ADDRESS_ABANDON
    assert len( set( a.address for _,a in paths_accts )) == 3

    assert list( addresses( SEED_ABANDON_HEX, paths="m/44'/60'/0'/0/0-2" )) == [
        ( p, a.address ) for p,a in paths_accts
    ]
    assert list( addresses( BIP39_ABANDON )) == [ ( "m/44'/60'/0'/0/0", ADDRESS_ABANDON ) ]

    unbounded			= addresses( BIP39_ABANDON, paths="m/44'/60'/0'/0/-" )
    assert [ next( unbounded ) for _ in range( 3 ) ] == [ ( p, a.address ) for p,a in paths_accts ]
