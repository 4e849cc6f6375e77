import sys

from storegen.cli import main

if __name__ == "__main__":
    sys.exit(main())
