"""Standard library logging for third-party loggers.

Our own code logs through logfire. uvicorn, SQLAlchemy and alembic still use
the logging module, so their output is formatted and levelled here.
"""

import logging
import sys

from tyrantcam.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Loggers that stay at WARNING unless debug is on
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "alembic.runtime.migration")


def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    quiet_level = logging.INFO if settings.debug else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger(__name__).info(
        "Logging ready for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
