"""Web adapter serving the closures API and front end."""

from barrier_closures.adapters.web.app import WebAdapter, create_app

__all__ = ["WebAdapter", "create_app"]
