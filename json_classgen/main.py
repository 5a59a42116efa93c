"""Command-line entry point."""

from __future__ import annotations

import sys

from .codegen.cli_integration import create_parser, handle_codegen_command
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, set up logging and run the generator.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv``).

    Returns:
        Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.debug(f"Parsed arguments: {args}")

    try:
        return handle_codegen_command(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
