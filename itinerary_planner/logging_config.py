import logging

from itinerary_planner.config import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = None) -> None:
    """
    Configure the root logger once per process.
    Call it from entry points only; other modules just use logging.getLogger(__name__).
    """
    level_name = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
    )
