import sys

from broll_organizer.cli import main

sys.exit(main())
