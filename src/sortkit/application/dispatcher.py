from loguru import logger
from rich.console import Console

from sortkit.application.commands import (
    DemoCommand,
    ListCommand,
    SortCommand,
    handle_demo,
    handle_list,
    handle_sort,
)
from sortkit.core.config import Config
from sortkit.domain.strategies import StrategyRegistry


class CommandDispatcher:
    """Dispatches CLI commands to appropriate handlers"""

    def __init__(
        self,
        config: Config,
        registry: StrategyRegistry,
        console: Console | None = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.console = console or Console()
        self._handlers = {
            "demo": self._handle_demo,
            "sort": self._handle_sort,
            "list": self._handle_list,
        }

    def dispatch(self, argv: list[str]) -> int:
        """Parse and execute command

        Args:
            argv: Command line arguments (sys.argv)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if len(argv) < 2:
            self._print_usage()
            return 1

        method = argv[1]
        handler = self._handlers.get(method)

        if handler is None:
            logger.error(f"Unknown method: {method}")
            self._print_usage()
            return 1

        return handler(argv)

    def _print_usage(self) -> None:
        """Print available commands"""
        logger.error(
            "No method specified. Available: demo, sort [--strategy NAME] ITEM..., list"
        )

    def _handle_demo(self, argv: list[str]) -> int:
        """Handle demo command"""
        command = DemoCommand(name="demo")
        return handle_demo(self.registry, self.console, command)

    def _handle_sort(self, argv: list[str]) -> int:
        """Handle sort command"""
        args = argv[2:]
        strategy = self.config.default_strategy

        if args and args[0] in ("--strategy", "-s"):
            if len(args) < 2:
                logger.error("--strategy requires a strategy name")
                return 1
            strategy = args[1]
            args = args[2:]
        elif args and args[0].startswith("--strategy="):
            strategy = args[0].partition("=")[2]
            args = args[1:]

        strategy = strategy.strip().lower()
        if not strategy:
            logger.error("--strategy requires a strategy name")
            return 1

        command = SortCommand(name="sort", strategy=strategy, items=list(args))
        return handle_sort(self.registry, self.console, command)

    def _handle_list(self, argv: list[str]) -> int:
        """Handle list command"""
        command = ListCommand(name="list")
        return handle_list(self.registry, self.console, command)
