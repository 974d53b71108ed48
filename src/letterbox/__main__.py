import sys

from letterbox.main import main

sys.exit(main())
