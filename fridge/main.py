import logging

import uvicorn
from fridge.api.api_run import app
from fridge.utilities.config import APP_HOST, APP_PORT, DEBUG, LOG_LEVEL

logger = logging.getLogger("fridge_app")


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting Fridge Tracker on http://%s:%s (debug=%s)", APP_HOST, APP_PORT, DEBUG)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
