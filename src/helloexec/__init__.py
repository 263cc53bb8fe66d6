"""Hello World Explorer execution service.

This package runs the prebuilt "hello world" program of a chosen
language and returns its captured output, exit code and duration.

The top-level modules include:

* ``config`` – configuration handling for environment variables.
* ``executor`` – strategy table and the binary/interpreter executors.
* ``dispatcher`` – the ``run(language, resource_root)`` entry point.
* ``models`` – Pydantic models defining request and response schemas.
* ``api`` – FastAPI application exposing HTTP endpoints.
"""

from .dispatcher import run  # noqa: F401
