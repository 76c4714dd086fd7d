"""Interactive command-line front-end for the Campus Navigator.

Loads a campus map, prints a short summary and then reads commands
(``DFS``, ``BFS``, ``MST``, ``Exit``) line by line until exit or end of
input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from pydantic import ValidationError

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import (
    BuildingNotFoundError,
    ConfigurationError,
    GraphError,
    GraphValidationError,
)
from .logging_setup import configure_logging
from .services import NavigationService

logger = logging.getLogger(__name__)

MENU = (
    "Type one of the following to choose an algorithm: \n"
    "1.) DFS - To Do Depth First Search\n"
    "2.) BFS - To Do Breadth First Search\n"
    "3.) MST - To Do Kruskal's Minimum Spanning Tree\n"
    "4.) Exit - To exit the program\n"
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class ShellSession:
    """State shared by the command handlers of one interactive run.

    Attributes:
        service: Navigation service holding the validated graph
        stdin: Stream commands and building names are read from
        stdout: Stream results are written to
    """

    service: NavigationService
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    running: bool = True

    def read_line(self) -> Optional[str]:
        """Read one stripped line, or None at end of input."""
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)


def _traverse(session: ShellSession, walk: Callable[[str], List]) -> None:
    session.write("Enter starting building")
    name = session.read_line()
    if name is None:
        session.running = False
        return
    try:
        order = walk(name)
    except BuildingNotFoundError:
        session.write("Building not found")
        return
    session.write(" ".join(node.name for node in order))


def handle_dfs(session: ShellSession) -> None:
    _traverse(session, session.service.depth_first)


def handle_bfs(session: ShellSession) -> None:
    _traverse(session, session.service.breadth_first)


def handle_mst(session: ShellSession) -> None:
    forest = session.service.minimum_spanning_forest()
    session.write("Minimum Spanning Tree Results:")
    for edge in forest:
        session.write(str(edge))


def handle_exit(session: ShellSession) -> None:
    session.running = False


COMMANDS: Dict[str, Callable[[ShellSession], None]] = {
    "DFS": handle_dfs,
    "BFS": handle_bfs,
    "MST": handle_mst,
    "Exit": handle_exit,
}


def run_shell(session: ShellSession) -> None:
    """Dispatch commands until ``Exit`` or end of input."""
    while session.running:
        command = session.read_line()
        if command is None:
            break
        handler = COMMANDS.get(command)
        if handler is None:
            logger.debug("Unrecognized command", extra={"command": command})
            session.write("Invalid input, please try again")
        else:
            handler(session)
            if not session.running:
                break
        session.write(" ")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="campus-navigator",
        description="Explore a campus map with DFS, BFS and Kruskal's MST.",
    )
    parser.add_argument(
        "map_file",
        nargs="?",
        type=Path,
        help="Campus map file (defaults to CAMPUS_GRAPH_DATA_DIR/CAMPUS_GRAPH_MAP_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override CAMPUS_LOG_LEVEL",
    )
    return parser.parse_args(argv)


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    config: Optional[AppConfig] = None,
) -> int:
    """Run the interactive navigator and return the process exit code."""
    args = parse_args(argv)
    try:
        config = config or get_config()
    except (ConfigurationError, ValidationError) as e:
        print(f"Invalid configuration: {e}", file=stdout or sys.stdout)
        return 1
    if args.map_file is not None:
        graph_config = config.graph.model_copy(
            update={
                "data_dir": args.map_file.parent,
                "map_file": args.map_file.name,
            }
        )
        config = config.model_copy(update={"graph": graph_config})

    configure_logging(config.observability, level=args.log_level)

    service: NavigationService = Container.create_default(config).resolve(
        NavigationService
    )
    session = ShellSession(
        service=service,
        stdin=stdin or sys.stdin,
        stdout=stdout or sys.stdout,
    )

    try:
        service.load()
    except GraphValidationError as e:
        session.write(e.message)
        return 0
    except GraphError as e:
        logger.error("Could not load campus map", extra={"error": str(e)})
        session.write(f"Error occurred while reading file: {e}")
        return 1

    session.write("Welcome to Campus Navigator!")
    session.write(service.summary())
    session.write(MENU)
    run_shell(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
