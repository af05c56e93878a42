"""
Application configuration and settings.
Centralized environment variables and constants.
"""
import os
from typing import List, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------
# ENV controls environment-specific behavior:
# - dev  : local development (employee DB auto-built, optionally seeded from CSV)
# - uat  : staging / UAT (pre-provisioned employee DB)
# - prod : production     (pre-provisioned employee DB)
ENV = os.getenv("ENV", "dev").lower()

# -----------------------------------------------------------------------------
# Employee Data Configuration
# -----------------------------------------------------------------------------
# DEV  : DB is created on startup and seeded from CSV if CSV_PATH is set.
# UAT/PROD: Expect a pre-provisioned SQLite DB; CSV is never used to seed it.
EMPLOYEE_CSV_PATH = os.getenv("CSV_PATH")

if ENV == "dev":
    EMPLOYEE_DB_PATH = os.getenv("DB_PATH", "hr_dashboard.db")
else:
    EMPLOYEE_DB_PATH = os.getenv("DB_PATH", "hr_dashboard_prod.db")

# Next-ID scheme: EMP-0001, EMP-0002, ...
EMPLOYEE_ID_PREFIX = os.getenv("EMPLOYEE_ID_PREFIX", "EMP")
EMPLOYEE_ID_WIDTH = int(os.getenv("EMPLOYEE_ID_WIDTH", "4"))

# -----------------------------------------------------------------------------
# Dashboard Configuration
# -----------------------------------------------------------------------------
UPCOMING_BIRTHDAY_WINDOW_DAYS = int(os.getenv("UPCOMING_BIRTHDAY_WINDOW_DAYS", "60"))
UPCOMING_BIRTHDAY_LIMIT = int(os.getenv("UPCOMING_BIRTHDAY_LIMIT", "5"))
TOP_PERFORMER_LIMIT = int(os.getenv("TOP_PERFORMER_LIMIT", "3"))

# -----------------------------------------------------------------------------
# HTTP / Logging
# -----------------------------------------------------------------------------
# Comma-separated list; "*" allows any origin (matches the old PHP API).
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class Settings(BaseModel):
    """Explicit configuration handed to the app factory at startup."""
    env: str = "dev"
    db_path: str = "hr_dashboard.db"
    csv_path: Optional[str] = None
    employee_id_prefix: str = "EMP"
    employee_id_width: int = Field(default=4, ge=1)
    birthday_window_days: int = Field(default=60, ge=0)
    birthday_limit: int = Field(default=5, ge=0)
    top_performer_limit: int = Field(default=3, ge=0)
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    @property
    def seed_from_csv(self) -> bool:
        return self.env == "dev" and bool(self.csv_path)


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def load_settings() -> Settings:
    """Build a Settings object from the module-level environment values."""
    return Settings(
        env=ENV,
        db_path=EMPLOYEE_DB_PATH,
        csv_path=EMPLOYEE_CSV_PATH,
        employee_id_prefix=EMPLOYEE_ID_PREFIX,
        employee_id_width=EMPLOYEE_ID_WIDTH,
        birthday_window_days=UPCOMING_BIRTHDAY_WINDOW_DAYS,
        birthday_limit=UPCOMING_BIRTHDAY_LIMIT,
        top_performer_limit=TOP_PERFORMER_LIMIT,
        cors_origins=_split_origins(CORS_ORIGINS) or ["*"],
        log_level=LOG_LEVEL,
    )
