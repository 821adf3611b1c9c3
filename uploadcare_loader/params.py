"""
Transformation parameter handling for Uploadcare URLs.
Parses user overrides, merges them with defaults and renders the path segment.
"""
import logging
from typing import Mapping, Optional

from .types import TransformationParams

logger = logging.getLogger(__name__)

AUTO_FORMAT = 'auto'
JPEG_FORMATS = ('jpg', 'jpeg')

MAX_OUTPUT_JPEG_WIDTH = 5000
MAX_OUTPUT_WIDTH = 3000

def default_params(resize_width: int) -> TransformationParams:
    """Default transformations, in the order they appear in the URL."""
    return {
        'format': AUTO_FORMAT,
        'stretch': 'off',
        'progressive': 'yes',
        'resize': f"{resize_width}x",
        'quality': 'normal',
    }

def parse_user_params(value: Optional[str]) -> TransformationParams:
    """
    Parse a comma-separated list of key/value pairs.

    Args:
        value: String such as 'format/jpg, quality/smart_retina'

    Returns:
        Ordered mapping of parameter names to values
    """
    params = {}
    if not value:
        return params

    for item in value.split(','):
        item = item.strip()
        if not item:
            continue

        key, sep, param_value = item.partition('/')
        key, param_value = key.strip(), param_value.strip()
        if not sep or not key or not param_value:
            logger.warning(f"Ignoring malformed transformation parameter: '{item}'")
            continue

        params[key] = param_value

    return params

def merge_params(defaults: Mapping[str, str], overrides: Mapping[str, str]) -> TransformationParams:
    """Replace defaults with same-key overrides and append the unknown ones."""
    merged = dict(defaults)
    merged.update(overrides)
    return merged

def resolve_format(requested: Optional[str], extension: str) -> str:
    """Format the CDN will produce; 'auto' falls back to the source extension."""
    if not requested or requested.lower() == AUTO_FORMAT:
        return extension.lower()
    return requested.lower()

def max_resize_width(fmt: str) -> int:
    if fmt in JPEG_FORMATS:
        return MAX_OUTPUT_JPEG_WIDTH
    return MAX_OUTPUT_WIDTH

def clamp_width(width: int, fmt: str) -> int:
    # 0 means "auto" and is never clamped
    if width <= 0:
        return 0
    return min(width, max_resize_width(fmt))

def build_transformation_segment(params: Mapping[str, str]) -> str:
    """Render params as '/-/key/value/-/key/value/'."""
    operations = [f"{key}/{value}" for key, value in params.items()]
    return f"/-/{'/-/'.join(operations)}/"
