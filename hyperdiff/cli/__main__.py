import sys

from hyperdiff.cli import main

sys.exit(main())
