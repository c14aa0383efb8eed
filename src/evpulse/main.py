"""Main entry point for EVPulse."""

import sys

from evpulse.cli import main as cli_main
from evpulse.ui import run_streamlit_app


def main():
    """Main entry point - delegates to CLI or UI based on arguments."""
    if len(sys.argv) > 1 and sys.argv[1] == "ui":
        sys.exit(run_streamlit_app())
    else:
        cli_main()


if __name__ == "__main__":
    main()
