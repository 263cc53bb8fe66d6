"""Configuration loader.

The hello-world service reads its configuration from environment
variables so the same install can run from a developer checkout or a
packaged application.  Defaults work for local development.

Environment variables:

``HELLOEXEC_RESOURCE_DIR``
    Resource root containing the ``binaries`` directory produced by the
    build step.  Defaults to ``./resources``.  The directory is not
    created; it must be provided by the build or packaging step.

``HELLOEXEC_API_KEY``
    Shared secret expected in the ``x-api-key`` header.  Empty disables
    the check, which is fine for a local UI.

``HELLOEXEC_LOG_LEVEL``
    Name of the logging level for the ``helloexec`` loggers.  Defaults
    to ``INFO``.

``HELLOEXEC_HOST``
    Address the API server binds to.  Defaults to ``127.0.0.1``.

``PORT``
    Port the API server listens on.  Defaults to 8080.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Centralised configuration object."""

    resource_dir: Path
    api_key: str
    log_level: str
    host: str
    port: int

    @classmethod
    def load(cls) -> "Config":
        resource_dir = Path(os.getenv("HELLOEXEC_RESOURCE_DIR", "resources"))

        # May be empty when the API is only reachable from localhost.
        api_key = os.getenv("HELLOEXEC_API_KEY", "")

        log_level = os.getenv("HELLOEXEC_LOG_LEVEL", "INFO").upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Invalid HELLOEXEC_LOG_LEVEL: {log_level}")

        host = os.getenv("HELLOEXEC_HOST", "127.0.0.1")

        port_env = os.getenv("PORT")
        if port_env is None:
            port = 8080
        else:
            try:
                port = int(port_env)
            except ValueError:
                raise ValueError(f"Invalid integer for PORT: {port_env}")

        return cls(
            resource_dir=resource_dir,
            api_key=api_key,
            log_level=log_level,
            host=host,
            port=port,
        )

    @classmethod
    def from_env(cls) -> "Config":
        """Alternate constructor used by the API; same as :meth:`load`."""
        return cls.load()
