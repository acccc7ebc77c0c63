import sys

from awesomecsv.cli import main

sys.exit(main())
