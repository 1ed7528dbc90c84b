"""Image processing adapters."""

from .cloudinary_client import CloudinaryClient
from .remove_bg_client import RemoveBgClient

__all__ = ["CloudinaryClient", "RemoveBgClient"]
