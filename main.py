# main.py - run the word index CLI from a source checkout
#   python main.py notes.txt --report highest

import sys

from word_index.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
