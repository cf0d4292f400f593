"""
Entry Point Script (Bootstrap)
==============================
Starts the application from a source checkout without installing it.

Usage:
    $ python run.py --mode stepped --circles 7
"""
import os
import sys

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from ioscircles.main import main

if __name__ == "__main__":
    sys.exit(main())
