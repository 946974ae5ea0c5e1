import logging
from typing import Optional

FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def create_logger(log_path: Optional[str] = None, level: int = logging.INFO):
    """
    Creates the root logger used by the runners.

    Args:
        log_path (str): Optional path of a log file that mirrors the console output.
        level (int): Logging level of the root logger.

    Returns:
        logger: The logger object.
    """
    logger = logging.getLogger()
    logger.setLevel(level)
    formatter = logging.Formatter(FORMAT)

    # Repeated calls (tests, chained runners) must not stack handlers
    for h in list(logger.handlers):
        if getattr(h, "_trustnet", False):
            logger.removeHandler(h)
            h.close()

    if log_path:
        fh = logging.FileHandler(log_path)
        fh.setFormatter(formatter)
        fh._trustnet = True
        logger.addHandler(fh)

    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    sh._trustnet = True
    logger.addHandler(sh)

    return logger
