import sys

from program_engine.cli import main

sys.exit(main())
