import sys

from sxmd.cli import main

sys.exit(main())
