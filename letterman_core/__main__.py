import sys

from letterman_core.morph_platform.cli import main

sys.exit(main())
