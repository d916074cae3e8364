import sys

from ranking_bm25.cli import main

sys.exit(main())
