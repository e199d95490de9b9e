import sys

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from sortkit.application.dispatcher import CommandDispatcher
from sortkit.core.config import Config
from sortkit.core.log import configure_logging
from sortkit.domain.strategies.registry import registry
from sortkit.shared.exceptions import SortKitError


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for sortkit

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    load_dotenv(find_dotenv(usecwd=True))

    try:
        config = Config.from_env()
    except SortKitError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging(config)

    dispatcher = CommandDispatcher(config, registry)

    try:
        return dispatcher.dispatch(sys.argv if argv is None else argv)
    except SortKitError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
