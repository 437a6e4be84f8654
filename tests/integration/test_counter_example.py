# tests/integration/test_counter_example.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import io
import json

import pytest

from examples import counter
from snapstate import Command, CommandNotAvailableError, Machine
from snapstate.config import CLIConfig


@pytest.fixture
def machine():
    return Machine(counter.build_registry(), counter.READY, counter.CounterData())


class TestCounterMachine:
    def test_inc_outputs_and_stays_ready(self, machine):
        assert machine.execute(Command.of("inc")) == "Count is now: 1"
        assert machine.data.count == 1
        assert machine.current_state is counter.READY

    def test_reset_and_inherited_show(self, machine):
        machine.execute(Command.of("inc"))
        machine.execute(Command.of("inc"))
        assert machine.execute(Command.of("show")) == "Count: 2"
        assert machine.execute(Command.of("reset")) == "Count reset."
        assert machine.data.count == 0

    def test_root_only_offers_show(self):
        m = Machine(counter.build_registry(), counter.ROOT, counter.CounterData())
        with pytest.raises(CommandNotAvailableError):
            m.execute(Command.of("inc"))
        names = [d.name for d in m.registry.find_available_commands(m.current_state)]
        assert names == ["show"]


class TestCounterCLI:
    @pytest.fixture
    def app(self, tmp_path, monkeypatch):
        monkeypatch.delenv("COUNTER_FILE", raising=False)
        monkeypatch.delenv("COUNTER_LOG_LEVEL", raising=False)
        app = counter.build_app()
        app.config = CLIConfig(snapshot_path=str(tmp_path / "counter.json"))
        return app

    def _run(self, app, *argv):
        out, err = io.StringIO(), io.StringIO()
        code = app.main(list(argv), stdout=out, stderr=err)
        return code, out.getvalue(), err.getvalue()

    def test_count_survives_invocations(self, app):
        for expected in (1, 2, 3):
            code, out, _ = self._run(app, "inc")
            assert code == 0
            assert f"> Count is now: {expected}" in out

        with open(app.config.snapshot_path, encoding="utf-8") as f:
            assert json.load(f) == {"currentStateName": "Ready", "data": {"count": 3}}

    def test_status_and_help_printed(self, app):
        _, out, _ = self._run(app)
        assert "State: Ready | Count: 0" in out
        assert "Available Commands:" in out
        for name in ("inc", "reset", "show"):
            assert f"  - {name}" in out
