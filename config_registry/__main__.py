import sys

from config_registry.cli.main import main

sys.exit(main())
