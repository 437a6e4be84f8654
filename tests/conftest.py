# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from snapstate import CommandDef, Registry, Result, State
from tests.helpers import Payload


@pytest.fixture
def root_state():
    """A root State (no parent)."""
    return State("Root")


@pytest.fixture
def child_state(root_state):
    """A State whose parent is the root."""
    return State("Child", root_state)


@pytest.fixture
def grandchild_state(child_state):
    """A State two levels below the root."""
    return State("Grandchild", child_state)


@pytest.fixture
def registry():
    """An empty registry."""
    return Registry()


@pytest.fixture
def hierarchy_registry(registry, grandchild_state):
    """A registry with Root > Child > Grandchild registered through the leaf."""
    registry.register_state(grandchild_state)
    return registry


@pytest.fixture
def payload():
    return Payload()


@pytest.fixture
def echo_handler():
    """A handler mock that returns its command's name as output."""
    handler = MagicMock(side_effect=lambda ctx, m, cmd: Result(output=cmd.name))
    return handler


@pytest.fixture
def make_def():
    """Returns a factory for CommandDef objects."""

    def _factory(name: str, args: str = "", description: str = "") -> CommandDef:
        return CommandDef(name=name, args=args, description=description)

    return _factory
