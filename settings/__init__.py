"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("FORMATION_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("FORMATION_LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("FORMATION_LOG_TO_FILE", "0") == "1"

# Coalition analysis
CONNECTED_SPREAD = 5
MAX_ENUMERATED_PARTIES = 20
