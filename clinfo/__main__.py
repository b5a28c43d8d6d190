import sys

from clinfo.cli import main

sys.exit(main())
