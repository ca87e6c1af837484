import logging

import uvicorn

from wellness.api.dashboard import app
from wellness.utilities.config import APP_HOST, APP_PORT, BACKEND_URL, LOG_LEVEL


def main():
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url = f"http://localhost:{APP_PORT}"
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Dashboard running on {local_url} (Press CTRL+C to quit)")
    print(f"Remote service: {BACKEND_URL}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
