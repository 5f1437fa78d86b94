#!/usr/bin/env python3
"""Script to run the capital-count latency sweep."""

from pathlib import Path
import sys

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from latency_sweep.cli import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
