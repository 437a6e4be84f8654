# examples/character.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Character sheet demo -- a tiny RPG sheet kept across invocations.

Run:
    python -m examples.character create Aria Elf Mage
    python -m examples.character take-damage 4
    python -m examples.character levelup
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Annotated, List, Optional

from pydantic import Field

from snapstate import Command, CommandContext, CommandDef, CommandError, Machine, Registry, Result, State
from snapstate.cli import CLIApp
from snapstate.config import CLIConfig


@dataclass
class Stats:
    strength: Annotated[int, Field(alias="str")] = 0
    dexterity: Annotated[int, Field(alias="dex")] = 0
    constitution: Annotated[int, Field(alias="con")] = 0


@dataclass
class CharacterData:
    name: str = ""
    race: str = ""
    class_name: Annotated[str, Field(alias="class")] = ""
    level: int = 0
    hp: int = 0
    max_hp: int = 0
    base_stats: Stats = field(default_factory=Stats)
    inventory: List[str] = field(default_factory=list)


ROOT = State("Root")
NO_SHEET = State("NoSheet", ROOT)
SHEET_EXISTS = State("SheetExists", ROOT)


# -- Handlers -----------------------------------------------------------------

def create(ctx: CommandContext, m: Machine[CharacterData], cmd: Command) -> Result:
    if len(cmd.args) != 3:
        raise CommandError("usage: create [name] [race] [class]")
    name, race, class_name = cmd.args
    m.data = CharacterData(
        name=name,
        race=race,
        class_name=class_name,
        level=1,
        hp=10,
        max_hp=10,
        base_stats=Stats(strength=10, dexterity=10, constitution=10),
        inventory=[],
    )
    return Result(output=f"'{name}' the {race} {class_name} has been created!", next_state=SHEET_EXISTS)


def take_damage(ctx: CommandContext, m: Machine[CharacterData], cmd: Command) -> Result:
    if len(cmd.args) != 1:
        raise CommandError("usage: take-damage [amount]")
    try:
        amount = int(cmd.args[0])
    except ValueError:
        raise CommandError("invalid amount: must be a number") from None
    m.data.hp = max(0, m.data.hp - amount)
    return Result(output=f"{m.data.name} takes {amount} damage!")


def levelup(ctx: CommandContext, m: Machine[CharacterData], cmd: Command) -> Result:
    m.data.level += 1
    # Constitution bonus on top of the base 5, never below 1.
    con_bonus = math.floor((m.data.base_stats.constitution - 10) / 2)
    m.data.max_hp += max(1, 5 + con_bonus)
    m.data.hp = m.data.max_hp
    return Result(output=f"{m.data.name} reached level {m.data.level}!")


def build_registry() -> Registry[CharacterData]:
    registry: Registry[CharacterData] = Registry()
    registry.register_state(NO_SHEET)
    registry.register_state(SHEET_EXISTS)
    registry.register_command(
        NO_SHEET, CommandDef("create", "[name] [race] [class]", "Create a new character."), create
    )
    registry.register_command(
        SHEET_EXISTS, CommandDef("take-damage", "[amount]", "Inflict damage to the character."), take_damage
    )
    registry.register_command(SHEET_EXISTS, CommandDef("levelup", description="Level up the character."), levelup)
    return registry


# -- Views --------------------------------------------------------------------

def render_status(m: Machine[CharacterData]) -> str:
    if m.current_state.name == NO_SHEET.name:
        return "No character sheet found. Create one to begin."
    return render_sheet(m.data)


def render_sheet(data: CharacterData) -> str:
    bar = "-" * 50
    ratio = data.hp / data.max_hp if data.max_hp > 0 else 0.0
    blocks = max(0, min(20, int(ratio * 20)))
    hp_bar = f"[{'#' * blocks}{' ' * (20 - blocks)}]"
    stats = (
        f"STR: {data.base_stats.strength}, DEX: {data.base_stats.dexterity}, "
        f"CON: {data.base_stats.constitution}"
    )
    lines = [
        bar,
        f"| {'Name: ' + data.name:<20} | Race: {data.race:<19} |",
        f"| {'Class: ' + data.class_name:<20} | Level: {data.level:<18} |",
        bar,
        f"| HP: {f'{data.hp} / {data.max_hp}':<17} {hp_bar:<22} |",
        f"| Stats: {stats:<41} |",
        bar,
        "| Inventory:                                       |",
    ]
    if not data.inventory:
        lines.append("|   - (Empty)                                      |")
    for item in data.inventory:
        lines.append(f"|   - {item:<42} |")
    lines.append(bar)
    return "\n".join(lines)


def build_app() -> CLIApp[CharacterData]:
    return CLIApp(
        build_registry(),
        NO_SHEET,
        CharacterData,
        data_type=CharacterData,
        render_status=render_status,
        config=CLIConfig(snapshot_path="character_sheet.json"),
        env_prefix="CHARACTER",
        prog="character",
        description="Character sheet kept between runs.",
    )


def main(argv: Optional[List[str]] = None) -> int:
    return build_app().main(argv)


if __name__ == "__main__":
    sys.exit(main())
