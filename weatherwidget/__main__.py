import sys

from weatherwidget.cli import main

sys.exit(main())
