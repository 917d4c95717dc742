import sys

from redaadic.cli import main

sys.exit(main())
