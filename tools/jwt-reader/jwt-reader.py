#!/usr/bin/env python3
"""
Print the claims payload of a JWT without verifying its signature.

Usage:
    python3 jwt-reader.py                      # decode the built-in example token
    python3 jwt-reader.py "<token>"
    echo "<token>" | python3 jwt-reader.py --stdin
    python3 jwt-reader.py --header "<token>"

This shim delegates to the jwt_reader package under src/.
"""

import os
import sys

# Ensure the src/ directory is on the Python path so the package can be found
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from jwt_reader.cli import main

if __name__ == "__main__":
    main()
