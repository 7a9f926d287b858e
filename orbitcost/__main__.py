import sys

from .bootstrap.entrypoints import cli_main

sys.exit(cli_main())
