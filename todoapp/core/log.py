"""
Fabrique de loggers pour tout le projet.

Configuration unique (niveau + format), le niveau vient de LOG_LEVEL.
"""

import logging

from todoapp.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Retourne un logger configuré.

    Args:
        name: nom du logger (en général __name__)
    """
    logging.basicConfig(level=settings.LOG_LEVEL, format=LOG_FORMAT)
    return logging.getLogger(name)
