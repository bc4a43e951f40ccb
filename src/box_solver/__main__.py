import sys

from box_solver.cli import main

sys.exit(main())
