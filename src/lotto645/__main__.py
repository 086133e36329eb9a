import sys

from lotto645.cli import main

sys.exit(main())
