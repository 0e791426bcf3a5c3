"""HTTP surface of the anagram dictionary: Flask app factory and a requests-based client."""
from .client import AnagramClient, ApiError
from .web import create_app

__all__ = ["AnagramClient", "ApiError", "create_app"]
