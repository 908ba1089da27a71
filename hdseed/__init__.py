
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
from .version		import __version__		# noqa F401
from .api		import *			# noqa F403
from .bip39		import *			# noqa F403
from .bip32		import *			# noqa F403
from .path		import *			# noqa F403
from .keys		import *			# noqa F403
from .wordlist		import (			# noqa F401
    WordTableError, UnknownLanguage, WordTable, languages, register, wordtable, detect_language,
)
from .			import bip39, bip32, path, keys, wordlist, defaults, api	# noqa F401
