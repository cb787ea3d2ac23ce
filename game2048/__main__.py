import sys

from game2048.console import main

if __name__ == '__main__':
    sys.exit(main())
