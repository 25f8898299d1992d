# facet_counts/config.py
import os
import re
import logging
from pathlib import Path
from dotenv import load_dotenv
from . import __version__

# Load environment variables
load_dotenv()

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)?$")


def _relation_name(env_name: str, default: str) -> str:
    """Read a table/view name from the environment and make sure it is a plain identifier"""
    value = os.getenv(env_name, default).strip()
    if not _IDENTIFIER.match(value):
        raise ValueError(f"{env_name} is not a valid SQL identifier: {value!r}")
    return value


class Config:
    """Configuration settings for the facet service"""

    APP_NAME: str = os.getenv("APP_NAME", "facet-counts")
    APP_VERSION: str = os.getenv("APP_VERSION", __version__)

    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL")
    if not DATABASE_URL:
        raise ValueError("No DATABASE_URL set in environment")

    DB_POOL_MIN_SIZE: int = int(os.getenv("DB_POOL_MIN_SIZE", "2"))
    DB_POOL_MAX_SIZE: int = int(os.getenv("DB_POOL_MAX_SIZE", "10"))
    DB_COMMAND_TIMEOUT: float = float(os.getenv("DB_COMMAND_TIMEOUT", "30"))

    # Relations holding the pre-aggregated counts
    CATEGORIES_TABLE: str = _relation_name("CATEGORIES_TABLE", "categories")
    ITEMS_TABLE: str = _relation_name("ITEMS_TABLE", "items")
    FILTER_COUNTS_VIEW: str = _relation_name("FILTER_COUNTS_VIEW", "mv_filter_counts")
    GENERAL_FILTER_COUNTS_VIEW: str = _relation_name(
        "GENERAL_FILTER_COUNTS_VIEW", "mv_general_filter_counts"
    )

    # HTTP settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    API_PREFIX: str = os.getenv("API_PREFIX", "/functions/v1").rstrip("/")

    # Other settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Paths
    LOG_DIR = Path(os.getenv("LOG_DIR", str(BASE_DIR / "logs")))

    # Ensure directories exist
    LOG_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging():
    """Configure logging settings"""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    log_file = Config.LOG_DIR / "facet_counts.log"

    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
        format=log_format,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
