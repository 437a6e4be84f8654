# examples/counter.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Counter demo -- the smallest useful snapstate program.

Run:
    python -m examples.counter inc
    python -m examples.counter show
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional

from snapstate import Command, CommandContext, CommandDef, Machine, Registry, Result, State
from snapstate.cli import CLIApp
from snapstate.config import CLIConfig


@dataclass
class CounterData:
    count: int = 0


ROOT = State("Root")
READY = State("Ready", ROOT)


def increment(ctx: CommandContext, m: Machine[CounterData], cmd: Command) -> Result:
    m.data.count += 1
    return Result(output=f"Count is now: {m.data.count}")


def reset(ctx: CommandContext, m: Machine[CounterData], cmd: Command) -> Result:
    m.data.count = 0
    return Result(output="Count reset.")


def show(ctx: CommandContext, m: Machine[CounterData], cmd: Command) -> Result:
    return Result(output=f"Count: {m.data.count}")


def build_registry() -> Registry[CounterData]:
    registry: Registry[CounterData] = Registry()
    registry.register_state(READY)
    registry.register_command(READY, CommandDef("inc", description="Increment the counter."), increment)
    registry.register_command(READY, CommandDef("reset", description="Set the counter back to zero."), reset)
    registry.register_command(ROOT, CommandDef("show", description="Print the counter."), show)
    return registry


def build_app() -> CLIApp[CounterData]:
    return CLIApp(
        build_registry(),
        READY,
        CounterData,
        data_type=CounterData,
        render_status=lambda m: f"State: {m.current_state.name} | Count: {m.data.count}",
        config=CLIConfig(snapshot_path="counter.json"),
        env_prefix="COUNTER",
        prog="counter",
        description="Persistent counter.",
    )


def main(argv: Optional[List[str]] = None) -> int:
    return build_app().main(argv)


if __name__ == "__main__":
    sys.exit(main())
