# tests/unit/runtime/test_async_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Unit tests for coroutine handlers dispatched through AsyncMachine."""

import asyncio

import pytest

from snapstate import (
    Command,
    CommandCancelledError,
    CommandContext,
    CommandDef,
    CommandNotAvailableError,
    Registry,
    Result,
    Snapshot,
    State,
)
from snapstate.runtime.async_support import AsyncMachine
from tests.helpers import Payload

ROOT = State("Root")
OFFLINE = State("Offline", ROOT)
ONLINE = State("Online", ROOT)


async def connect(ctx, m, cmd):
    await asyncio.sleep(0)
    ctx.raise_if_cancelled()
    m.data.notes.append("connected")
    return Result(output="connected", next_state=ONLINE)


def ping(ctx, m, cmd):
    m.data.count += 1
    return Result(output="pong")


@pytest.fixture
def registry():
    registry: Registry[Payload] = Registry()
    registry.register_state(OFFLINE)
    registry.register_state(ONLINE)
    registry.register_command(OFFLINE, CommandDef("connect"), connect)
    registry.register_command(ROOT, CommandDef("ping"), ping)
    return registry


@pytest.mark.asyncio
async def test_awaits_coroutine_handler_and_transitions(registry):
    m = AsyncMachine(registry, OFFLINE, Payload())

    output = await m.execute(Command.of("connect"))

    assert output == "connected"
    assert m.current_state is ONLINE
    assert m.data.notes == ["connected"]


@pytest.mark.asyncio
async def test_plain_handlers_still_work(registry):
    m = AsyncMachine(registry, ONLINE, Payload())
    assert await m.execute(Command.of("ping")) == "pong"
    assert m.data.count == 1
    assert m.current_state is ONLINE


@pytest.mark.asyncio
async def test_unknown_command(registry):
    m = AsyncMachine(registry, ONLINE, Payload())
    with pytest.raises(CommandNotAvailableError):
        await m.execute(Command.of("connect"))
    assert m.current_state is ONLINE


@pytest.mark.asyncio
async def test_cancelled_context_reaches_handler(registry):
    m = AsyncMachine(registry, OFFLINE, Payload())
    ctx = CommandContext()
    ctx.cancel()

    with pytest.raises(CommandCancelledError):
        await m.execute(Command.of("connect"), ctx)

    assert m.current_state is OFFLINE
    assert m.data.notes == []


def test_from_snapshot_returns_async_machine(registry):
    m = AsyncMachine.from_snapshot(registry, Snapshot("Online", Payload(count=3)))
    assert isinstance(m, AsyncMachine)
    assert m.current_state is ONLINE
