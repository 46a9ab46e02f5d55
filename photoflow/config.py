import logging
import os
from dotenv import load_dotenv

load_dotenv()

# In-memory SQLite keeps the store volatile; point this at a file or server URL to persist.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")

API_TITLE = os.getenv("API_TITLE", "Photoflow - Photography Project Planner")
LOG_LEVEL = os.getenv("PHOTOFLOW_LOG_LEVEL", "INFO").upper()

UPCOMING_DEADLINES_LIMIT = int(os.getenv("UPCOMING_DEADLINES_LIMIT", 5))
UPCOMING_EVENTS_LIMIT = int(os.getenv("UPCOMING_EVENTS_LIMIT", 3))
RECENT_PROJECTS_LIMIT = int(os.getenv("RECENT_PROJECTS_LIMIT", 6))

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = None):
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    logging.getLogger(__name__).info("Logging initialized at %s", level_name)
