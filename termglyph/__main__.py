import sys

from termglyph.cli import main

if __name__ == "__main__":
    sys.exit(main())
