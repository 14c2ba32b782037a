import sys

from bintally.cli import main

sys.exit(main())
