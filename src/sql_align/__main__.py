import sys

from sql_align.cli import main

sys.exit(main())
