import sys

__version__ = '0.1.0.dev0'
__author__ = 'The timetally developers'
__url__ = 'https://github.com/timetally/timetally'
__licence__ = 'GPL'

DEBUG = '--debug' in sys.argv
