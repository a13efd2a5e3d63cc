import sys

from mcp_time_cli.main import main

sys.exit(main())
