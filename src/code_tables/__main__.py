import sys

from code_tables.cli import main

sys.exit(main())
