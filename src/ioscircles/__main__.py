"""
Run with: python -m ioscircles
"""
import sys

from ioscircles.main import main

if __name__ == "__main__":
    sys.exit(main())
