import logging

from app.core.config import settings


def configure_logging(level: str = None) -> None:
    """Configures the root logger once for the whole application.

    Args:
        level (str, optional): Log level name. Defaults to ``settings.LOG_LEVEL``.
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
