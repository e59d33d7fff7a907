"""
config.py
---------
Central configuration module. Loads environment variables from the
.env file (if any) and exposes them as typed constants.

The defaults match the credentials declared in docker-compose.yml,
so the tutorial runs against the bundled container without any setup.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "tutorial_db")
DB_USER: str = os.getenv("DB_USER", "tutorial")
DB_PASS: str = os.getenv("DB_PASS", "tutorial")

DATABASE_URL: str = (
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
)

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
