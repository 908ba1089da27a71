import os

from setuptools import setup

#
# All platforms
#
HERE				= os.path.dirname( os.path.abspath( __file__ ))

install_requires		= open( os.path.join( HERE, "requirements.txt" )).readlines()
tests_require			= open( os.path.join( HERE, "requirements-tests.txt" )).readlines()

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':			tests_require,
}

# Must work if setup.py is run in the source distribution context, or from
# within the packaged distribution directory.
__version__			= None
try:
    exec( open( os.path.join( HERE, 'hdseed/version.py' ), 'r' ).read() )
except FileNotFoundError:
    exec( open( 'version.py', 'r' ).read() )

package_dir			= {
    "hdseed":			"./hdseed",
}

long_description_content_type	= 'text/markdown'
long_description		= """\
Recovering Ethereum, Bitcoin and other HD wallet accounts requires
bit-exact agreement with the BIP-39 and BIP-32 standards: the same
Mnemonic phrase (and passphrase) must yield the same seed, and the
same seed must yield the same keys at each derivation path, on any
conforming implementation.

The python-hdseed project implements:

- BIP-39 Mnemonic generation from random (or supplied) entropy, and
  validation and recovery of Mnemonic phrases (with checksum
  verification) in any language with a standard 2048-word table.
- BIP-39 seed derivation from a Mnemonic phrase and optional
  passphrase.
- BIP-32 Hierarchical Deterministic (HD) key derivation from a seed,
  along derivation paths such as *m/44'/60'/0'/0/0*, yielding the
  private key, public key and Ethereum address of each account.

## Producing and Recovering a BIP-39 Mnemonic

    >>> import hdseed
    >>> hdseed.produce_mnemonic( "00" * 16 )
    'abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about'
    >>> hdseed.recover_seed( "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about" ).hex()[:16]
    '5eb00bbddcf06908'

User-entered phrases are polished before validation: excess whitespace
is removed, words are down-cased, the language is detected, and
unambiguous word prefixes are expanded.

## Deriving HD Wallet Accounts

    >>> hdseed.address( "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about" )
    '0x9858EfFD232B4033E47d90003D41EC34EcaEda94'

Ranges of accounts may be derived using path ranges, eg. *m/44'/60'/0'/0/0-9*.
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Topic :: Security :: Cryptography",
    "Topic :: Office/Business :: Financial",
]

setup(
    name			= "hdseed",
    version			= __version__,
    install_requires		= install_requires,
    tests_require		= tests_require,
    extras_require		= extras_require,
    packages			= package_dir.keys(),
    package_dir			= package_dir,
    include_package_data	= True,
    zip_safe			= True,
    author			= "Perry Kundert",
    author_email		= "perry@dominionrnd.com",
    description			= "Standards-compliant BIP-39 Mnemonic seed generation and recovery, and BIP-32 HD wallet key derivation",
    long_description		= long_description,
    long_description_content_type = long_description_content_type,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "Ethereum Bitcoin cryptocurrency BIP-39 BIP-32 HD wallet mnemonic seed recovery",
    classifiers			= classifiers,
    python_requires		= ">=3.9",
)
