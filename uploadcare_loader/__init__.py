"""
Uploadcare image loader

Rewrites image sources into Uploadcare CDN transformation URLs:
1. Proxying relative and remote images through the Uploadcare proxy
2. Adding transformations to images already hosted on the CDN
3. Building responsive srcset strings
"""

from .config import ConfigurationError, LoaderConfig
from .loader import build_srcset, uploadcare_loader

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "LoaderConfig",
    "build_srcset",
    "uploadcare_loader",
]
