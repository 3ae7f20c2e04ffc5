# ---------------------------------------------------------------------------
# Author  : Railway Asset Dashboard team
# Version : 20261019v1
# ---------------------------------------------------------------------------
"""
Logging setup for the dashboard backend.

Levels, handlers and formats come from etc/logging.conf; the rotating file
handler writes to log/app.log under the project root.  Fallbacks from the
remote identity provider are logged at WARNING, discarded stale session
updates at INFO, corrupt session records at ERROR.

Usage:
    from core.logger import logger
"""

import configparser
import logging
import logging.config
from pathlib import Path

# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------
# backend/core/logger.py -> project root is three levels up
_ROOT = Path(__file__).resolve().parents[2]
LOG_FILE = _ROOT / "log" / "app.log"
LOGGING_CONF = _ROOT / "etc" / "logging.conf"


def _load_config(conf_path: Path, log_file: Path) -> configparser.RawConfigParser:
    """Read *conf_path* with the ``%(log_file)s`` placeholder filled in."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    text = conf_path.read_text(encoding="utf-8").replace("%(log_file)s", str(log_file))
    # raw parser: format strings carry %(asctime)s and friends
    parser = configparser.RawConfigParser()
    parser.read_string(text)
    return parser


# ---------------------------------------------------------------------------
# Apply on import
# ---------------------------------------------------------------------------
logging.config.fileConfig(_load_config(LOGGING_CONF, LOG_FILE), disable_existing_loggers=False)

logger = logging.getLogger("railway")
