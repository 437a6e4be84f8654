# snapstate/cli.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Runner for non-interactive CLI programs built on a snapstate registry.

One invocation = load snapshot, execute at most one command, save snapshot,
print status. Options go before the command name; everything after it is
passed to the command untouched.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, Generic, List, Optional, Sequence, TextIO, Type

from snapstate.config import CLIConfig
from snapstate.core.commands import Command, CommandDef
from snapstate.core.errors import SnapshotError, SnapshotFormatError, SnapshotNotFoundError, StateNotFoundError
from snapstate.core.machine import Machine
from snapstate.core.registry import Registry
from snapstate.core.states import State
from snapstate.interfaces.protocols import SnapshotStorage, StatusRenderer
from snapstate.interfaces.types import DataT
from snapstate.persistence.store import SnapshotStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def parse_command(argv: Sequence[str]) -> Optional[Command]:
    """First token is the command name, the rest are its arguments."""
    return Command.from_argv(list(argv))


def format_available_commands(definitions: Sequence[CommandDef]) -> str:
    """Render a help listing for the given command definitions."""
    lines = ["Available Commands:"]
    if not definitions:
        lines.append("  (None)")
    for d in definitions:
        lines.append(f"  - {d.name:<15} {d.args:<20} {d.description}".rstrip())
    return "\n".join(lines)


def configure_logging(config: CLIConfig, stream: Optional[TextIO] = None) -> None:
    logging.basicConfig(level=config.level, format=LOG_FORMAT, stream=stream or sys.stderr)
    logging.getLogger("snapstate").setLevel(config.level)


class CLIApp(Generic[DataT]):
    """
    Wires a registry to a snapshot file and the process arguments.

    :param registry: States and commands of the application.
    :param initial_state: State of a fresh machine when no snapshot exists.
    :param data_factory: Builds the payload of a fresh machine.
    :param data_type: Payload type used to decode snapshots.
    :param render_status: Optional presenter printed after every invocation.
    :param config: Defaults, overridden by environment and command line.
    :param env_prefix: Prefix for ``<PREFIX>_FILE`` / ``<PREFIX>_LOG_LEVEL``.
    """

    def __init__(
        self,
        registry: Registry[DataT],
        initial_state: State,
        data_factory: Callable[[], DataT],
        data_type: Optional[Type[DataT]] = None,
        render_status: Optional[StatusRenderer] = None,
        config: Optional[CLIConfig] = None,
        env_prefix: str = "SNAPSTATE",
        prog: Optional[str] = None,
        description: Optional[str] = None,
    ) -> None:
        self.registry = registry
        self.initial_state = initial_state
        self.data_factory = data_factory
        self.data_type = data_type
        self.render_status = render_status
        self.config = config or CLIConfig()
        self.env_prefix = env_prefix
        self.prog = prog
        self.description = description

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=self.prog, description=self.description)
        parser.add_argument("-f", "--file", help="snapshot file to load and save", default=None)
        parser.add_argument("-v", "--verbose", action="count", default=0, help="more logging (-vv for debug)")
        parser.add_argument("command", nargs="?", help="command to execute")
        parser.add_argument("args", nargs=argparse.REMAINDER, help="command arguments")
        return parser

    def resolve_config(self, options: argparse.Namespace) -> CLIConfig:
        config = CLIConfig.from_env(self.env_prefix, defaults=self.config)
        if options.file:
            config = replace(config, snapshot_path=options.file)
        if options.verbose:
            level = "DEBUG" if options.verbose > 1 else "INFO"
            config = replace(config, log_level=level)
        return config

    def load_machine(self, store: SnapshotStorage) -> Machine[DataT]:
        """
        Restore the machine from ``store``, or start fresh if nothing is stored.

        :param store: Any storage collaborator; the runner uses :class:`SnapshotStore`.
        :raises SnapshotFormatError: If the stored snapshot is malformed.
        :raises StateNotFoundError: If it names an unknown state.
        """
        try:
            snapshot = store.load()
        except SnapshotNotFoundError as e:
            logger.info("No snapshot at %s, starting in %r", e.path, self.initial_state.name)
            return Machine(self.registry, self.initial_state, self.data_factory())
        return Machine.from_snapshot(self.registry, snapshot)

    def main(
        self,
        argv: Optional[Sequence[str]] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> int:
        """
        Run one invocation and return the process exit code.
        """
        out = stdout or sys.stdout
        err = stderr or sys.stderr
        options = self.build_parser().parse_args(argv)
        try:
            config = self.resolve_config(options)
        except ValueError as e:
            print(f"Error: {e}", file=err)
            return 1
        configure_logging(config, err)

        store: SnapshotStore[DataT] = SnapshotStore(config.snapshot_path, self.data_type)
        try:
            machine = self.load_machine(store)
        except (SnapshotFormatError, StateNotFoundError) as e:
            print(f"Error: {e}", file=err)
            return 1

        exit_code = 0
        command = parse_command(self._command_tokens(options))
        if command is not None:
            try:
                output = machine.execute(command)
            except Exception as e:
                logger.debug("Command %r failed", command.name, exc_info=True)
                output = getattr(e, "output", "")
                print(f"Error: {e}", file=err)
                exit_code = 1
            if output:
                print(f"> {output}", file=out)

        try:
            store.save(machine.get_snapshot())
        except (OSError, SnapshotError) as e:
            print(f"Error saving snapshot: {e}", file=err)
            return 1

        print(file=out)
        if self.render_status is not None:
            print(self.render_status(machine), file=out)
            print(file=out)
        print(format_available_commands(self.registry.find_available_commands(machine.current_state)), file=out)
        return exit_code

    @staticmethod
    def _command_tokens(options: argparse.Namespace) -> List[str]:
        if options.command is None:
            return []
        return [options.command, *options.args]
