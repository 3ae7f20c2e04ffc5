# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Application configuration.
Everything is loaded from environment variables or etc/app.conf.  The
Firebase web API key is the only credential-like value and it is never
logged.
"""

from pathlib import Path

from pydantic_settings import BaseSettings

# Project root is two levels up from this file  (backend/core/config.py → project/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_VAR_DIR = _PROJECT_ROOT / "var"


class Settings(BaseSettings):
    # When true the remote identity provider is never contacted and only the
    # demo credential table is used.  Read once at process start.
    use_local_auth: bool = False

    # Firebase project – leave empty to run without a remote provider
    firebase_api_key: str = ""
    firebase_project_id: str = ""

    # Durable local storage for the persisted session record
    database_url: str = f"sqlite:///{_VAR_DIR / 'railway.db'}"

    # Base URL of the service exposing /api/getProductsFast
    products_api_url: str = "http://localhost:5001"

    # Applies to every outbound HTTP call (identity, profiles, products)
    remote_timeout_seconds: float = 10.0

    # PBKDF2 rounds for the demo credential hashes
    password_hash_rounds: int = 29_000

    model_config = {"env_file": str(_PROJECT_ROOT / "etc" / "app.conf")}


# Module-level singleton – import this everywhere: from core.config import settings
settings = Settings()
