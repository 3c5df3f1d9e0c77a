"""Backend entrypoint: starts uvicorn with the port from env."""
import os
import uvicorn

from portfolio_tracker.config.settings import get_settings
from portfolio_tracker.main import app


def main() -> None:
    port = int(os.environ.get("BACKEND_PORT", "3777"))
    host = os.environ.get("BACKEND_HOST", "127.0.0.1")
    uvicorn.run(app, host=host, port=port, log_level=get_settings().log_level.lower())


if __name__ == "__main__":
    main()
