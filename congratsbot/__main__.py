import sys

from congratsbot.cli.main import main

sys.exit(main())
