import logging
import os

from dotenv import load_dotenv

from ataxx.ai.constants import DEFAULT_MINIMAX_DEPTH

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_search_depth():
    """Search depth from ATAXX_SEARCH_DEPTH, or the default of 4 plies."""
    value = os.getenv("ATAXX_SEARCH_DEPTH")
    if value is None:
        return DEFAULT_MINIMAX_DEPTH
    try:
        depth = int(value)
    except ValueError:
        depth = 0
    if depth < 1:
        logger.warning("Ignoring ATAXX_SEARCH_DEPTH=%r, using %d", value, DEFAULT_MINIMAX_DEPTH)
        return DEFAULT_MINIMAX_DEPTH
    return depth


def get_log_level():
    """Logging level name from ATAXX_LOG_LEVEL, or INFO."""
    value = os.getenv("ATAXX_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if value not in LOG_LEVELS:
        logger.warning("Ignoring ATAXX_LOG_LEVEL=%r, using %s", value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return value
