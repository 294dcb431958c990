import sys

from passforge import main

if __name__ == "__main__":
    sys.exit(main())
