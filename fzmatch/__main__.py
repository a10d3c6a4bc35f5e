import sys

from fzmatch.cli import main


sys.exit(main())
