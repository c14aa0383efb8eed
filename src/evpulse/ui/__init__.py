"""Streamlit dashboard for EVPulse."""

import subprocess
import sys
from pathlib import Path

APP_PATH = Path(__file__).parent / "streamlit_app.py"


def run_streamlit_app() -> int:
    """Launch the dashboard with ``streamlit run``; returns the exit status."""
    print("Launching EVPulse UI...")
    try:
        subprocess.run([sys.executable, "-m", "streamlit", "run", str(APP_PATH)], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nUI stopped by user")
    return 0
