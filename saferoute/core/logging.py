"""
Logging setup for SafeRoute.

Modules log through `logging.getLogger(__name__)`; this configures the root
handler once at application startup.
"""

import logging

from saferoute.core.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s: %(name)s - %(message)s"

_configured = False


def configure_logging(level: str = None) -> None:
    global _configured
    if _configured:
        return

    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    _configured = True
