import logging

from app.core.config import settings
from app.core.routers import address

logger = logging.getLogger(__name__)


def bootstrap_app(app):
    prefix = settings.API_PREFIX.rstrip("/")

    app.include_router(address.router, prefix=prefix, tags=["Endereços"])
    logger.info("Routers registered under prefix %r.", prefix or "/")
