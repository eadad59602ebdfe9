"""FastAPI REST API for cabinet quotes.

Exposes quote pricing, sheet nesting, formula evaluation and request
validation over HTTP.

Usage:
    uvicorn cabinet_pricing.web:app --reload
"""

from cabinet_pricing.web.app import app, create_app

__all__ = ["app", "create_app"]
