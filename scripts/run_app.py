#!/usr/bin/env python
"""
Launch the Streamlit quote calculator page.

Usage:
    python scripts/run_app.py
    QUOTE_WEBHOOK_URL=https://hook.example.com/abc python scripts/run_app.py
"""
import os
import subprocess
import sys
from pathlib import Path


def main():
    project_root = Path(__file__).parent.parent
    page = project_root / 'src' / 'quote_calculator' / 'ui' / 'app_streamlit.py'

    if not page.exists():
        print(f"ERROR: quote page not found at {page}")
        sys.exit(1)

    if not os.environ.get('QUOTE_WEBHOOK_URL'):
        print("WARNING: QUOTE_WEBHOOK_URL is not set; Submit Quote will report an error.")

    cmd = [sys.executable, '-m', 'streamlit', 'run', str(page)]
    print(f"Starting quote calculator: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nQuote calculator stopped.")


if __name__ == "__main__":
    main()
