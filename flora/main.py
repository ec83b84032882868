import logging

import uvicorn
from flora.api.api_run import app
from flora.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL, TREFLE_API_KEY


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if not TREFLE_API_KEY:
        logging.getLogger("flora_app").warning("TREFLE_API_KEY is not set; catalog requests will fail.")
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
