"""Run the API with uvicorn using the host and port from the environment."""

from __future__ import annotations

import uvicorn

from .main import app, config


def main() -> None:
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
