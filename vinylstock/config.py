"""Configuration: env, data paths, API host/port, supplier order defaults."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of vinylstock package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so VINYLSTOCK_* overrides are set
load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("VINYLSTOCK_DATA_DIR", str(BASE_DIR / "data")))
RECORDS_PATH = DATA_DIR / "records.json"

# API
API_HOST = os.getenv("VINYLSTOCK_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("VINYLSTOCK_API_PORT", "8000"))

LOG_LEVEL = os.getenv("VINYLSTOCK_LOG_LEVEL", "INFO").upper()

# Supplier re-order message
ORDER_COPIES = int(os.getenv("VINYLSTOCK_ORDER_COPIES", "10"))
SHOP_SIGNATURE = os.getenv("VINYLSTOCK_SHOP_SIGNATURE", "Gregorio")


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
