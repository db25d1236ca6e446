# utils/settings.py
# Hard-coded configuration for the storefront demo.
from pathlib import Path

APP_TITLE = "Demo Storefront"
WINDOW_GEOMETRY = "960x640"

CURRENCY_SYMBOL = "$"

# How long a notification stays visible (milliseconds, Tk "after" units)
NOTIFICATION_DELAY_MS = 2000

STORAGE_DIR = Path("data/storage")
CATALOGUE_FILE = "catalogue.json"

LOG_DIR = Path("data/logs")
LOG_FILE = "storefront.log"
LOGGER_NAME = "storefront"
