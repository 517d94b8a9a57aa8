"""
Development server with auto-reload

Usage:
    python scripts/run-dev.py
"""

import os
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
os.chdir(project_root)

from gym_agent.server import main


if __name__ == "__main__":
    main(reload=True)
