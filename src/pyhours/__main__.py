import sys

from pyhours.cli import main

sys.exit(main())
