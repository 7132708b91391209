#!/usr/bin/env python3
"""
Parameter Store CLI

Run pstore from a source checkout without installing the package.
"""

import os
import sys

# Add the parent directory to the path so we can import the pstore package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pstore.cli import main

if __name__ == "__main__":
    sys.exit(main())
