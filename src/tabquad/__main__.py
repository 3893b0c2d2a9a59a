import sys

from tabquad._cli import main

sys.exit(main())
