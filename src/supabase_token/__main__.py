"""Main entry point for Supabase Token."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
