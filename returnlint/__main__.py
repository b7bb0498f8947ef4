import sys

from returnlint.cli import main

sys.exit(main())
