import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = Path(os.getenv("WEDDING_DATA_DIR", BASE_DIR / "data"))
CONFIG_FILE = Path(os.getenv("WEDDING_CONFIG_FILE", BASE_DIR / "config.json"))
DATABASE_FILE = Path(os.getenv("WEDDING_DATABASE_FILE", DATA_DIR / "database.json"))
PUBLIC_DIR = BASE_DIR / "public"

# Server config
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
DEBUG = os.getenv("FLASK_DEBUG", "").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Value sent as Access-Control-Allow-Origin on API responses
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "*")
