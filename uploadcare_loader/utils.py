"""
URL helper functions for resolving and rewriting image sources.
"""
import logging
import posixpath
from typing import Optional
from urllib.parse import urljoin, urlsplit

logger = logging.getLogger(__name__)

def get_extension(src):
    """Lowercased extension of the last path segment, without the dot."""
    path = urlsplit(src).path
    _, extension = posixpath.splitext(posixpath.basename(path))
    return extension.lstrip('.').lower()

def is_absolute_url(src):
    """True for URLs with a scheme and for protocol-relative URLs."""
    if src.startswith('//'):
        return True
    return bool(urlsplit(src).scheme)

def get_host(src):
    """Lowercased hostname of an absolute URL, or an empty string."""
    if not is_absolute_url(src):
        return ''
    return (urlsplit(src).hostname or '').lower()

def insert_segment_before_filename(src, segment):
    """
    Insert a transformation segment between the directory and the filename.

    https://ucarecdn.com/<uuid>/image.png -> https://ucarecdn.com/<uuid>/-/.../image.png
    """
    parts = urlsplit(src)
    scheme = parts.scheme or 'https'
    directory, _, filename = parts.path.rpartition('/')

    url = f"{scheme}://{parts.netloc}{directory}{segment}{filename}"
    if parts.query:
        url = f"{url}?{parts.query}"
    if parts.fragment:
        url = f"{url}#{parts.fragment}"
    return url

def resolve_src(src: str, base_url: Optional[str]) -> Optional[str]:
    """
    Resolve an image source to an absolute URL.

    Args:
        src: Relative path or absolute URL
        base_url: Base URL of the application, used for relative paths

    Returns:
        The absolute URL, or None when a relative path has no base URL
    """
    if src.startswith('//'):
        return f"https:{src}"
    if is_absolute_url(src):
        return src
    if not base_url:
        return None
    return urljoin(base_url, src)

def join_url(endpoint: str, segment: str, target: str) -> str:
    """Join proxy endpoint, transformation segment and target without doubled slashes."""
    return f"{endpoint.rstrip('/')}/{segment.strip('/')}/{target}"
