import sys

from cap_sync_version.cli import main

sys.exit(main())
