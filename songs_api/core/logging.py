# ============================================================================
# FILE: songs_api/core/logging.py
# ============================================================================
import logging
import sys
from typing import Optional
from songs_api.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the API process"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # SQL echo is noisy at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
