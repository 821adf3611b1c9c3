import os
import logging
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urlsplit

from concurrent_log_handler import ConcurrentRotatingFileHandler
from dotenv import find_dotenv, load_dotenv

DEFAULT_CDN_DOMAIN = 'ucarecdn.com'
DEFAULT_PROXY_BASE_DOMAIN = 'ucr.io'
DEVELOPMENT = 'development'
PRODUCTION = 'production'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

MISSING_CREDENTIALS_MESSAGE = (
    "Both UPLOADCARE_PUBLIC_KEY and UPLOADCARE_CUSTOM_PROXY_DOMAIN are not set. "
    "Please set either one."
)

def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure logging with appropriate level and format.

    Args:
        verbose: Enable verbose (DEBUG) logging if True
        log_file: Optional path of a rotating log file

    Returns:
        logger: Configured logger instance
    """
    log_level = logging.DEBUG if verbose else logging.getLevelName(os.getenv('LOG_LEVEL', 'INFO').upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    handlers = [logging.StreamHandler()]
    if log_file:
        # Several CLI processes may share one log file
        handlers.append(ConcurrentRotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=7))

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging initialized at {logging.getLevelName(log_level)} level")
    if log_file:
        logger.debug(f"File logs will be saved to {log_file}")
    return logger

class ConfigurationError(ValueError):
    """Raised when the loader has neither a public key nor a custom proxy domain."""

def _env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None

def _hostname(domain: str) -> str:
    """Hostname of a configured domain, with or without a scheme."""
    if '://' not in domain:
        domain = f"//{domain}"
    return (urlsplit(domain).hostname or '').lower()

@dataclass
class LoaderConfig:
    """Configuration for the Uploadcare loader."""
    public_key: Optional[str] = None
    custom_proxy_domain: Optional[str] = None
    custom_cdn_domain: Optional[str] = None
    app_base_url: Optional[str] = None
    transformation_parameters: Optional[str] = None
    environment: str = PRODUCTION

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'LoaderConfig':
        """Build configuration from environment variables and an optional .env file."""
        # Look for .env in the working directory, not next to the installed package
        load_dotenv(env_file or find_dotenv(usecwd=True))

        return cls(
            public_key=_env('UPLOADCARE_PUBLIC_KEY'),
            custom_proxy_domain=_env('UPLOADCARE_CUSTOM_PROXY_DOMAIN'),
            custom_cdn_domain=_env('UPLOADCARE_CUSTOM_CDN_DOMAIN'),
            app_base_url=_env('UPLOADCARE_APP_BASE_URL'),
            transformation_parameters=_env('UPLOADCARE_TRANSFORMATION_PARAMETERS'),
            environment=(_env('APP_ENV') or PRODUCTION).lower(),
        )

    @property
    def is_development(self) -> bool:
        return (self.environment or '').lower() == DEVELOPMENT

    def validate_credentials(self) -> None:
        """Validate that the proxy can be addressed."""
        if not self.public_key and not self.custom_proxy_domain:
            raise ConfigurationError(MISSING_CREDENTIALS_MESSAGE)

    @property
    def proxy_endpoint(self) -> str:
        """Base URL of the proxy, without a trailing slash."""
        if self.custom_proxy_domain:
            endpoint = self.custom_proxy_domain
            if '://' not in endpoint:
                endpoint = f"https://{endpoint.lstrip('/')}"
            return endpoint.rstrip('/')

        return f"https://{self.public_key}.{DEFAULT_PROXY_BASE_DOMAIN}"

    @property
    def cdn_hosts(self) -> Tuple[str, ...]:
        hosts = [DEFAULT_CDN_DOMAIN]
        if self.custom_cdn_domain:
            custom_host = _hostname(self.custom_cdn_domain)
            if custom_host and custom_host not in hosts:
                hosts.append(custom_host)
        return tuple(hosts)

    def _masked_public_key(self) -> Optional[str]:
        if not self.public_key:
            return None
        return f"{self.public_key[:4]}***"

    def __str__(self) -> str:
        """String representation of configuration."""
        return (
            f"Uploadcare Loader Configuration:\n"
            f"- Environment: {self.environment}\n"
            f"- Public Key: {self._masked_public_key() or 'not set'}\n"
            f"- Proxy Domain: {self.custom_proxy_domain or 'not set'}\n"
            f"- CDN Hosts: {', '.join(self.cdn_hosts)}\n"
            f"- App Base URL: {self.app_base_url or 'not set'}\n"
            f"- Transformation Parameters: {self.transformation_parameters or 'defaults'}"
        )

    def __repr__(self) -> str:
        """Detailed string representation of configuration."""
        return (
            f"LoaderConfig("
            f"public_key='{self._masked_public_key()}', "
            f"custom_proxy_domain='{self.custom_proxy_domain}', "
            f"custom_cdn_domain='{self.custom_cdn_domain}', "
            f"app_base_url='{self.app_base_url}', "
            f"environment='{self.environment}'"
            f")"
        )
