"""
Launcher kept at the project root:

    python game.py 2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7
"""
import sys

from fairdice.cli import main

if __name__ == "__main__":
    sys.exit(main())
