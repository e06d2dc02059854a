# src/main.py
# Entry point: run the secure client bootstrap once and exit.
# Any failure is logged with its stack trace and re-raised, so the process
# exits with a non-zero status.

from logger import get_logger
from config import settings
from service import run_bootstrap

logger = get_logger(__name__)


def main():
    """
    Insert one document into MongoDB over TLS using the configured trust store.

    All parameters come from config.settings (fixed defaults, overridable
    through environment variables).
    """
    logger.info("=" * 60)
    logger.info("Starting MongoDB TLS client")
    logger.info(f"Environment: {settings.app.environment}")
    logger.info(f"Trust store: {settings.trust_store.path}")
    logger.info(f"Target: {settings.mongodb.database}.{settings.mongodb.collection}")
    logger.info("=" * 60)

    try:
        run_bootstrap(settings)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
