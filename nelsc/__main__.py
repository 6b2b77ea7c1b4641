import sys

from nelsc.cli import main

sys.exit(main())
