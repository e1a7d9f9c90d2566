"""Main entry point for the writebench package.

Usage:
    python -m writebench /tmp/testfile
    python -m writebench /dev/sdb --size 4096 --count 10000 --stats write_res.txt
    python -m writebench /tmp/testfile --fwrite --nosync --plot latency.png
"""

import sys

from .cli.write_test import main

if __name__ == "__main__":
    sys.exit(main())
