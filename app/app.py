"""
Activity search server.
Serves the REST API with uvicorn; settings come from the environment or a .env file.
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables before the package reads its configuration
load_dotenv()

# Add project root to path for package imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from activity_search.api.rest_api import get_api_app
from activity_search.config import API_HOST, API_PORT
from activity_search.logger import setup_logger

logger = setup_logger(__name__)

app = get_api_app()


def main():
    logger.info(f"Starting activity search API on http://{API_HOST}:{API_PORT} (docs at /api/docs)")
    uvicorn.run(app, host=API_HOST, port=API_PORT)


if __name__ == "__main__":
    main()
