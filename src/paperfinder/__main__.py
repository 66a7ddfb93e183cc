import sys

from paperfinder.cli import main

sys.exit(main())
