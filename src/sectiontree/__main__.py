import sys

from sectiontree.cli import main

sys.exit(main())
