"""
Sentry initialization for hosts embedding the analytics engine.

Only the logging integration is installed: ERROR records (for example an
unexpected exception inside a batch) become Sentry events, lower levels
become breadcrumbs.
"""
import logging

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from .config import settings

logger = logging.getLogger(__name__)


def init_sentry() -> bool:
    """Initialize Sentry if DSN is provided. Returns True when enabled."""
    if not settings.SENTRY_DSN:
        logger.info("Sentry DSN not provided. Error tracking disabled.")
        return False

    try:
        logging_integration = LoggingIntegration(
            level=logging.INFO,        # Capture info and above as breadcrumbs
            event_level=logging.ERROR   # Send errors as events
        )

        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=settings.SENTRY_ENVIRONMENT,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            integrations=[logging_integration],
            release=settings.APP_VERSION,
            send_default_pii=False,
            max_breadcrumbs=50,
        )
        logger.info("Sentry initialized")
        return True
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")
        return False
