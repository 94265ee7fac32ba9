import sys

from gecs_events.main import main

sys.exit(main())
