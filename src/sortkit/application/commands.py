from dataclasses import dataclass, field

from loguru import logger
from rich.console import Console
from rich.table import Table

from sortkit.domain.strategies import SortContext, StrategyRegistry

DEMO_ITEMS = ["banana", "apple", "cherry"]
DEMO_STRATEGIES = ["quick", "merge", "shell"]


@dataclass
class Command:
    """Base command class"""

    name: str


@dataclass
class DemoCommand(Command):
    """Run every demo strategy over the sample list"""

    items: list[str] = field(default_factory=lambda: list(DEMO_ITEMS))


@dataclass
class SortCommand(Command):
    """Sort user supplied items with one strategy"""

    strategy: str = "quick"
    items: list[str] = field(default_factory=list)


@dataclass
class ListCommand(Command):
    """Show registered strategy names"""


def render_result(console: Console, strategy: str, items: list[str]) -> None:
    """Print a one-row table with the list after sorting"""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Strategy")
    table.add_column("Result")
    table.add_row(strategy, ", ".join(items))
    console.print(table)


def handle_demo(
    registry: StrategyRegistry, console: Console, command: DemoCommand
) -> int:
    """Swap strategies on one context and sort a fresh copy each time

    Returns:
        Exit code
    """
    context = SortContext()
    for name in DEMO_STRATEGIES:
        strategy = registry.get(name)
        context.set_strategy(strategy)

        items = list(command.items)
        context.execute_sort(items)
        render_result(console, strategy.name, items)

    logger.info(f"Demo complete: {len(DEMO_STRATEGIES)} strategies run")
    return 0


def handle_sort(
    registry: StrategyRegistry, console: Console, command: SortCommand
) -> int:
    """Sort the command's items in place and render them

    Returns:
        Exit code
    """
    context = SortContext(registry.get(command.strategy))
    context.execute_sort(command.items)
    render_result(console, context.strategy.name, command.items)
    return 0


def handle_list(
    registry: StrategyRegistry, console: Console, command: ListCommand
) -> int:
    """Print each registered strategy name on its own line

    Returns:
        Exit code
    """
    for name in registry.list_available():
        console.print(name)
    return 0
