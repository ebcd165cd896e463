"""Route registry for registration and dispatch."""

import sys
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from consoler.binding import bind
from consoler.engine import Invocation, match_command
from consoler.exceptions import ConsolerError
from consoler.logging import bind_route_context, get_module_logger
from consoler.models import Command, ParsedCommand
from consoler.parsing import parse_command

logger = get_module_logger()

Handler = Callable[[Command], Any]


@dataclass(frozen=True)
class Route:
    """A registered route template and its handler."""

    template: str
    parsed: ParsedCommand
    handler: Handler

    @property
    def command(self) -> Optional[str]:
        return self.parsed.command


class RouteRegistry:
    """Ordered table of route templates with first-match dispatch.

    Attributes:
        namespace: Name of the registry, used in logs

    Example:
        registry = RouteRegistry("ops")

        @registry.route("deploy <env> --retries=<tries|type:number|default:3>")
        def deploy(command: Command):
            ...

        registry.dispatch(["deploy", "prod", "--retries=5"])
    """

    def __init__(self, namespace: str):
        self.namespace = namespace
        self._routes: List[Route] = []

    @property
    def routes(self) -> List[Route]:
        return list(self._routes)

    def route(self, template: str) -> Callable[[Handler], Handler]:
        """Decorator to register a handler for a route template."""

        def decorator(handler: Handler) -> Handler:
            self.add(template, handler)
            return handler

        return decorator

    def add(self, template: str, handler: Handler) -> Route:
        """Register a handler for a route template.

        Raises:
            ValueError: If a route for the same command is already registered.
        """
        parsed = parse_command(template)
        for existing in self._routes:
            if existing.command == parsed.command:
                raise ValueError(
                    f"Route for command '{parsed.command}' already registered "
                    f"in {self.namespace}"
                )

        route = Route(template=template, parsed=parsed, handler=handler)
        self._routes.append(route)
        logger.debug(
            "route_registered",
            namespace=self.namespace,
            route=route.command,
            template=template,
        )
        return route

    def resolve(self, cli: Invocation = None) -> Optional[Tuple[Route, Command]]:
        """Find the route an invocation is for and bind it.

        Returns:
            The matching route and bound Command, or None when no route
            matches.

        Raises:
            MissingArgument: If the matching route's required argument is missing.
            InvalidOption: If the matching route's options are violated.
        """
        invocation = parse_command(sys.argv[1:] if cli is None else cli)
        for route in self._routes:
            if not match_command(route.parsed, invocation):
                continue
            try:
                return route, bind(route.parsed, invocation)
            except ConsolerError as e:
                logger.warning(
                    "route_parse_failed",
                    namespace=self.namespace,
                    route=route.command,
                    argument=e.argument,
                    error=e.message,
                )
                raise

        logger.info(
            "route_not_found",
            namespace=self.namespace,
            command=invocation.command,
        )
        return None

    def dispatch(self, cli: Invocation = None) -> Any:
        """Resolve an invocation and call the matching handler.

        Returns:
            The handler's return value, or None when no route matches.
        """
        resolved = self.resolve(cli)
        if resolved is None:
            return None

        route, command = resolved
        with bind_route_context(route=route.command, namespace=self.namespace):
            logger.info(
                "route_dispatched",
                handler=getattr(route.handler, "__name__", repr(route.handler)),
                arguments=sorted(command.argument),
                options=sorted(command.option),
            )
            return route.handler(command)
