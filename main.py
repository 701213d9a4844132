import sys

from grid_tictactoe.app import main

if __name__ == '__main__':
    sys.exit(main())
