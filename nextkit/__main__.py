import sys

from nextkit.cli import main

sys.exit(main())
