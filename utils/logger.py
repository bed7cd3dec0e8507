import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

def setup_logger(log_dir: Path | str = "data/logs"):
    """
    Attach handlers to the "pizzashop" logger and return it.

    The GUI logs on the returned logger directly. Services and the menu
    repository log on child loggers ("pizzashop.orders",
    "pizzashop.pipeline", "pizzashop.mediator", "pizzashop.commands",
    "pizzashop.repository"), which propagate here. Tests never call
    this, so those children stay quiet under pytest.
    """

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "pizzashop.log"

    logger = logging.getLogger("pizzashop")
    logger.setLevel(logging.INFO)

    # setup_logger() may be called more than once
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger
