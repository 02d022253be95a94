import sys

from guci.repl import main

sys.exit(main())
