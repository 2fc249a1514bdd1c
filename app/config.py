# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Tuple
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_SUBMIT_DELAY_MS = int(os.getenv("SUBMIT_DELAY_MS", "1500"))
_REQUIRE_SHIPPING_METHOD = os.getenv("REQUIRE_SHIPPING_METHOD", "false").lower() in ("true", "1", "yes")
_LOGS_DIR = os.getenv("LOGS_DIR", None)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
_CONSOLE_LOG_LEVEL = os.getenv("CONSOLE_LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Catalog Listing Wizard"
    APP_TITLE: str = "Publish Product"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Verdent"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"
    LOG_PATH: Path = LOGS_DIR / "catalog_wizard.log"

    # Logging
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    LOG_BACKUP_COUNT: int = 3
    LOGGER_NAME: str = "catalog_wizard"
    LOG_LEVEL: str = _LOG_LEVEL  # file handler
    CONSOLE_LOG_LEVEL: str = _CONSOLE_LOG_LEVEL
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    CONSOLE_LOG_FORMAT: str = "%(levelname)-8s | %(name)s | %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # Wizard steps, in order
    WIZARD_STEPS: Tuple[str, ...] = (
        "Basic Information",
        "Images & Media",
        "Pricing & Stock",
        "Services & Guarantees",
        "Additional Info",
    )

    # Listing rules
    TITLE_MAX_LENGTH: int = 50
    PRIMARY_IMAGE_CAP: int = 5
    SECONDARY_IMAGE_CAP: int = 8
    DEFAULT_RETURNS_WINDOW_DAYS: int = 7

    # Also require a shipping method (step 3) at submit
    REQUIRE_SHIPPING_METHOD: bool = _REQUIRE_SHIPPING_METHOD

    # Simulated publish latency (milliseconds)
    SUBMIT_DELAY_MS: int = _SUBMIT_DELAY_MS

    # Image intake
    IMAGE_EXTENSIONS: Tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif")
    IMAGE_SIZE_HINT_BYTES: int = 2 * 1024 * 1024

    # Toast notifications
    TOAST_DURATION_MS: int = 3000
