"""Reseed the Appwrite listing collections with sample data.

Destructive: deletes every agent, review, gallery and property document
before creating new ones. Needs --force and an interactive "y".

Usage: python -m scripts.seed --force
"""

import sys

from restate_seed.cli import main

if __name__ == "__main__":
    sys.exit(main())
