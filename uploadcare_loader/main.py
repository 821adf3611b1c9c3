# main.py
import argparse
import logging
import sys
import traceback
from typing import List, Optional

from .config import ConfigurationError, LoaderConfig, setup_logging
from .formatters import TableFormatter
from .loader import build_srcset, uploadcare_loader

logger = logging.getLogger(__name__)

def parse_widths(value: str) -> List[int]:
    """Parse a comma-separated list of widths, e.g. '640,750,1080'."""
    try:
        widths = [int(item.strip()) for item in value.split(',') if item.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width list: '{value}'")

    if not widths or any(width < 0 for width in widths):
        raise argparse.ArgumentTypeError(f"widths must be non-negative integers: '{value}'")
    return widths

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Returns:
        args: Parsed command line arguments
    """
    parser = argparse.ArgumentParser(description='Build Uploadcare CDN transformation URLs for images')

    parser.add_argument('src', help='Image path or absolute URL')
    parser.add_argument('--width', type=int, default=0, help='Target width in pixels (0 = auto)')
    parser.add_argument('--quality', type=int, default=75, help='Requested quality percentage')
    parser.add_argument('--widths', type=parse_widths,
                        help='Comma-separated list of widths; prints a table and a srcset')

    config_group = parser.add_argument_group('Configuration Options')
    config_group.add_argument('--env-file', help='Path to a .env file with UPLOADCARE_* variables')
    config_group.add_argument('--environment', choices=['development', 'production'],
                              help='Override APP_ENV')

    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    parser.add_argument('--log-file', help='Also write logs to this (rotating) file')

    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> None:
    """Main execution function."""
    args = parse_arguments(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        config = LoaderConfig.from_env(args.env_file)
        if args.environment:
            config.environment = args.environment
        logger.debug(str(config))

        if args.widths:
            rows = [
                {'Width': width, 'URL': uploadcare_loader({'src': args.src, 'width': width, 'quality': args.quality}, config)}
                for width in sorted(set(args.widths))
            ]
            print(TableFormatter().format_variants_table(rows))
            print()
            print(build_srcset(args.src, args.widths, args.quality, config))
        else:
            print(uploadcare_loader({'src': args.src, 'width': args.width, 'quality': args.quality}, config))

    except ConfigurationError as e:
        logger.error(f"Configuration error: {str(e)}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error in main execution: {str(e)}")
        logger.error(traceback.format_exc())
        sys.exit(1)

if __name__ == "__main__":
    main()
