"""Webman - personal API-testing backend.

Stores collections of saved HTTP requests and relays arbitrary HTTP
requests on behalf of the browser front-end.
"""

__version__ = "0.1.0"

from webman.infrastructure.api.app import app

__all__ = ["app", "__version__"]
