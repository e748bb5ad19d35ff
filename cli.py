import sys

from makedeck.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
