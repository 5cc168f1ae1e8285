#!/usr/bin/env python3
"""
Run the perceptron demo (requires `pip install -e .`).

Usage:
    python scripts/run_perceptron.py
    python scripts/run_perceptron.py --inputs 2 0 --weights 0.5 -0.5 --bias -1.0
"""

import sys

from perceptron.cli import main

if __name__ == "__main__":
    sys.exit(main())
