"""
Development Runner
==================
Starts Got Tip? straight from a source checkout, with DEBUG logging so that
every rejected subtotal edit shows up in the console.

The 'src' directory is put on 'sys.path', so no 'pip install' is needed.

Usage:
    $ python run.py
    $ python run.py gottip-debug.log    # also write the log to a file
"""
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from gottip.main import main  # noqa: E402

if __name__ == "__main__":
    log_file = sys.argv[1] if len(sys.argv) > 1 else None
    sys.exit(main(log_level=logging.DEBUG, log_file=log_file))
