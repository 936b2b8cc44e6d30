from os.path import expanduser
from pathlib import Path

from loguru import logger


def _get_log_file_path() -> Path:
    home = expanduser("~")
    log_dir = Path(home) / ".bomtree" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "bomtree.log"


def setup_logger(level: str = "DEBUG"):
    log_file_path = _get_log_file_path()
    logger.remove()
    logger.add(
        log_file_path,
        level=level,
        rotation="10 MB",
        retention="7 days",
        compression="zip",
    )
