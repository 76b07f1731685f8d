import sys

from twotouch.cli import main

sys.exit(main())
