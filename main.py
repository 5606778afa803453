"""
Entry point for the Users API
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file before settings are read
load_dotenv()

from users_api.app import create_app
from users_api.config.settings import LOG_LEVEL, PORT

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = create_app()

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Users API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
