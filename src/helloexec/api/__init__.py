"""
Expose the FastAPI application instance.

Importing this module creates the FastAPI application and registers
all routes.  The service can be started with:

```sh
python -m helloexec.api
```
"""

from .main import app

__all__ = ["app"]
