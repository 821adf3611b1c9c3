import logging
from typing import Iterable, Optional

from .config import LoaderConfig
from .params import (
    build_transformation_segment,
    clamp_width,
    default_params,
    merge_params,
    parse_user_params,
    resolve_format,
)
from .types import ImageLoaderProps
from .utils import get_extension, get_host, insert_segment_before_filename, join_url, resolve_src

logger = logging.getLogger(__name__)

# Format negotiation is not supported for these
NOT_PROCESSED_EXTENSIONS = ('svg', 'gif')

def uploadcare_loader(props: ImageLoaderProps, config: Optional[LoaderConfig] = None) -> str:
    """
    Rewrite an image source into an Uploadcare transformation URL.

    Args:
        props: Image source, target width and (unused) quality
        config: Loader configuration. When omitted it is re-read from the environment
            (and .env) on every call; pass an explicit LoaderConfig in hot paths

    Returns:
        The transformation URL, or the source unchanged when it is passed through

    Raises:
        ConfigurationError: neither a public key nor a custom proxy domain is set
    """
    if config is None:
        config = LoaderConfig.from_env()

    src = props['src']
    width = props.get('width') or 0

    if config.is_development:
        logger.debug(f"Development mode, returning '{src}' as is")
        return src

    config.validate_credentials()

    extension = get_extension(src)
    if extension in NOT_PROCESSED_EXTENSIONS:
        logger.debug(f"Skipping '{src}': .{extension} files are not processed")
        return src

    user_params = parse_user_params(config.transformation_parameters)
    fmt = resolve_format(user_params.get('format'), extension)
    resize_width = clamp_width(width, fmt)
    if resize_width != max(width, 0):
        logger.debug(f"Width {width} clamped to {resize_width} for format '{fmt}'")

    params = merge_params(default_params(resize_width), user_params)
    segment = build_transformation_segment(params)

    if get_host(src) in config.cdn_hosts:
        return insert_segment_before_filename(src, segment)

    absolute_src = resolve_src(src, config.app_base_url)
    if absolute_src is None:
        logger.debug(f"No app base URL configured, returning relative '{src}' as is")
        return src

    return join_url(config.proxy_endpoint, segment, absolute_src)

def build_srcset(src: str, widths: Iterable[int], quality: Optional[int] = None,
                 config: Optional[LoaderConfig] = None) -> str:
    """Build a srcset attribute value with one loader URL per width."""
    if config is None:
        config = LoaderConfig.from_env()

    candidates = []
    for width in sorted(set(widths)):
        props: ImageLoaderProps = {'src': src, 'width': width}
        if quality is not None:
            props['quality'] = quality
        candidates.append(f"{uploadcare_loader(props, config)} {width}w")

    return ', '.join(candidates)
