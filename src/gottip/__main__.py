"""
Run with: python -m gottip
"""
import sys

from gottip.main import main

sys.exit(main())
