from fastapi import FastAPI
import logging

from fridge.api.dependencies import install_refrigerator

# Routers
from fridge.api.routes import products, reports

# Logging
logger = logging.getLogger("fridge_app")


def create_app() -> FastAPI:
    """Build an app owning one refrigerator, its lock and its event stream."""
    application = FastAPI(title="Fridge Tracker API")
    install_refrigerator(application)
    application.include_router(products.router)
    application.include_router(reports.router)
    logger.debug("Fridge Tracker app created")
    return application


app = create_app()
