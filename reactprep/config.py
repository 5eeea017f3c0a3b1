"""
Runtime configuration for ReactPrep.

Values come from the environment, optionally seeded from a .env file in the
project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).parent
PROJECT_ROOT = PACKAGE_DIR.parent

load_dotenv(PROJECT_ROOT / ".env")

# Content
CONTENT_DIR = Path(os.getenv("REACTPREP_CONTENT_DIR", str(PACKAGE_DIR / "content")))

# Progress persistence
DEFAULT_PROGRESS_DIR = Path.home() / ".reactprep"
PROGRESS_DB_PATH = Path(os.getenv("REACTPREP_PROGRESS_DB", str(DEFAULT_PROGRESS_DIR / "progress.db")))
PROGRESS_STORAGE_KEY = os.getenv("REACTPREP_PROGRESS_KEY", "react-prep-progress")

# Logging
LOG_LEVEL = os.getenv("REACTPREP_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Code rendering. Overlay positions assume every rendered code line is exactly
# CODE_LINE_HEIGHT_PX tall, so the code CSS and the positioner share these.
DEFAULT_LANGUAGE = "tsx"
CODE_LINE_HEIGHT_PX = 24
CODE_TOP_PADDING_PX = 16
LIGHT_THEME = "friendly"
DARK_THEME = "github-dark"
