"""
Dither a directory of photos to the Nord palette for a fixed screen
"""

import sys
from framedither.FrameBatch import main

if __name__ == '__main__':
	sys.exit(main(sys.argv[:]))
