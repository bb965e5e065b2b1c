"""
Utility functions for the application.
"""
from typing import Any, Dict
from urllib.parse import urlparse


def format_error(message: str, code: str) -> Dict[str, Any]:
    """Format error response."""
    return {"message": message, "code": code}


def build_public_url(base_url: str, prefix: str, name: str) -> str:
    """Join a request base URL (scheme://host[/root]) with a static prefix and file name."""
    parsed = urlparse(base_url)
    root = f"{parsed.scheme}://{parsed.netloc}{parsed.path}".rstrip("/")
    return f"{root}/{prefix.strip('/')}/{name}"
