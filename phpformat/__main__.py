"""Main entry point for phpformat package."""

import sys

from phpformat.cli.main import cli


def main() -> int:
    """Main function for phpformat."""
    try:
        return cli()
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
