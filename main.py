# main.py
import logging
import uvicorn
from facet_counts.app import create_application
from facet_counts.config import Config

app = create_application()


def main():
    logger = logging.getLogger(__name__)

    try:
        logger.info(f"Starting {Config.APP_NAME} on {Config.HOST}:{Config.PORT}...")
        uvicorn.run(app, host=Config.HOST, port=Config.PORT, log_level=Config.LOG_LEVEL.lower())
    except Exception as e:
        logger.error(f"Error starting server: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
