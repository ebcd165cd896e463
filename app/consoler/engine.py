"""Route matching engine.

Example:
    consoler = Consoler(
        "deploy <env> --retries=<tries|type:number|default:3>",
        ["deploy", "prod"],
    )
    if consoler.match():
        command = consoler.parse()
        # Command(command='deploy', argument={'env': 'prod'}, option={'tries': 3})
"""

import sys
from typing import Sequence, Union

from consoler.binding import bind
from consoler.exceptions import ConsolerError
from consoler.logging import get_module_logger
from consoler.models import Command, ParsedCommand
from consoler.parsing import parse_command

logger = get_module_logger()

Invocation = Union[str, Sequence[str], None]


def match_command(route: ParsedCommand, invocation: ParsedCommand) -> bool:
    """Does the invocation name the route's command? Exact comparison."""
    return route.command == invocation.command


class Consoler:
    """Matches a command line against a route template.

    The template is parsed once at construction. Each `parse()` call builds
    a new Command; the engine itself holds no per-call state.

    Attributes:
        route: The parsed route template
        cli: The parsed invocation
    """

    def __init__(self, route: str, cli: Invocation = None):
        """Initialize the engine.

        Args:
            route: Route template, e.g. "command <arg> [other] --opt=<name>".
            cli: Invocation tokens or a raw command line. Defaults to the
                arguments of the running process.
        """
        self.route = parse_command(route)
        self.cli = parse_command(sys.argv[1:] if cli is None else cli)

    def match(self) -> bool:
        """Check if the invocation names the route's command."""
        matched = match_command(self.route, self.cli)
        logger.debug(
            "route_matched" if matched else "route_not_matched",
            route=self.route.command,
            command=self.cli.command,
        )
        return matched

    def parse(self) -> Command:
        """Parse the invocation against the route.

        Returns:
            The bound Command, or an empty Command when the invocation is
            for another command.

        Raises:
            MissingArgument: If a required argument is missing.
            InvalidOption: If an option is declared or supplied incorrectly.
        """
        if not self.match():
            return Command.empty()

        try:
            return bind(self.route, self.cli)
        except ConsolerError as e:
            logger.warning(
                "route_parse_failed",
                route=self.route.command,
                argument=e.argument,
                error=e.message,
            )
            raise


def match(route: str, cli: Invocation = None) -> bool:
    """Check if an invocation matches a route template."""
    return Consoler(route, cli).match()


def parse(route: str, cli: Invocation = None) -> Command:
    """Parse an invocation against a route template."""
    return Consoler(route, cli).parse()
