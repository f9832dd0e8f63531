import sys

from mceval.repl import main

sys.exit(main())
