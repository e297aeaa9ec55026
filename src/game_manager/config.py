from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
CONFIG_DIR = PROJECT_ROOT / "config"
OUTLOOK_DIR = PROJECT_ROOT / "data" / "outlook"

# Default game configuration used by the outlook script
DEFAULT_CONFIG_FILE = CONFIG_DIR / "game.ini"

# Outlook report file names
OUTLOOK_CSV = "outlook.csv"
OUTLOOK_JSON = "outlook.json"
