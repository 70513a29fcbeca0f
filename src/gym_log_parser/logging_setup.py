import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logging(level: int | str = logging.WARNING) -> None:
    """
    Set up root logger with a stream handler.
    """
    root = logging.getLogger()
    if root.handlers:
        return  # already configured
    root.setLevel(level.upper() if isinstance(level, str) else level)
    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(ch)
