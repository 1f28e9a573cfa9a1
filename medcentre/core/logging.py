import logging

from medcentre.core.config import Settings, settings as default_settings

_JSON_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'


def configure_logging(settings: Settings | None = None) -> None:
    """Plain DEBUG logging in development, one-line JSON at INFO in production."""
    settings = settings or default_settings
    if settings.is_production:
        level = settings.log_level or "INFO"
        logging.basicConfig(level=level.upper(), format=_JSON_FORMAT)
    else:
        level = settings.log_level or "DEBUG"
        logging.basicConfig(level=level.upper())
