import sys

from .flappy_client import main

sys.exit(main())
