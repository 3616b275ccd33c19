"""Enables: python -m chunkpack [options] <source> <output>"""

from chunkpack.cli import main

if __name__ == "__main__":
    main()
