"""Command-line interface."""
import sys

from windmill.app.main import main

if __name__ == "__main__":
    sys.exit(main())
