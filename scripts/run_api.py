#!/usr/bin/env python
"""
Serve the quote calculator HTTP API with uvicorn.

Usage:
    python scripts/run_api.py            # port 8000
    QUOTE_API_PORT=9000 python scripts/run_api.py
"""
import os
import subprocess
import sys
from pathlib import Path


def main():
    project_root = Path(__file__).parent.parent

    # Make the src layout importable without an install
    env = os.environ.copy()
    src_path = str(project_root / "src")
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [src_path, env.get("PYTHONPATH")]))

    port = env.get("QUOTE_API_PORT", "8000")
    print(f"Starting Quote Calculator API on port {port}...")
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "quote_calculator.api.main:app",
            "--host", "0.0.0.0",
            "--port", port,
            "--reload",
        ], env=env, cwd=str(project_root))
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
