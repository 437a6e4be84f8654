# snapstate/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Set

from snapstate.core.errors import ValidationError
from snapstate.core.states import State

if TYPE_CHECKING:
    from snapstate.core.registry import Registry


class Validator:
    """
    Optional structural checks for a registry. The registry itself trusts the
    integrator; call this at startup to catch a badly built hierarchy early.
    """

    def __init__(self) -> None:
        self._rules = _DefaultValidationRules

    def collect_errors(self, registry: "Registry") -> List[str]:
        """
        Run every rule and return the problems found, in a stable order.

        :param registry: The registry to inspect.
        """
        states = registry.states()
        errors: List[str] = []
        errors.extend(self._rules.check_cycles(states))
        errors.extend(self._rules.check_name_collisions(states))
        errors.extend(self._rules.check_command_bindings(registry))
        return errors

    def validate_registry(self, registry: "Registry") -> None:
        """
        :raises ValidationError: If any rule fails; the message lists every problem.
        """
        errors = self.collect_errors(registry)
        if errors:
            raise ValidationError("\n".join(errors))


class _DefaultValidationRules:
    """
    Built-in rules. Each returns a list of human-readable messages.
    """

    @staticmethod
    def check_cycles(states: Dict[str, State]) -> List[str]:
        errors = []
        for name in sorted(states):
            seen: Set[int] = set()
            path: List[str] = []
            current = states[name]
            while current is not None:
                if id(current) in seen:
                    path.append(current.name)
                    errors.append(f"Cycle detected in state hierarchy: {' -> '.join(path)}")
                    break
                seen.add(id(current))
                path.append(current.name)
                current = current.parent
        return errors

    @staticmethod
    def check_name_collisions(states: Dict[str, State]) -> List[str]:
        """Distinct State objects in the hierarchy that share a name."""
        errors = []
        by_name: Dict[str, State] = {}
        reported: Set[str] = set()
        for name in sorted(states):
            seen: Set[int] = set()
            current = states[name]
            while current is not None and id(current) not in seen:
                seen.add(id(current))
                known = by_name.setdefault(current.name, current)
                if known is not current and current.name not in reported:
                    reported.add(current.name)
                    errors.append(f"Distinct states share the name '{current.name}'")
                current = current.parent
        return errors

    @staticmethod
    def check_command_bindings(registry: "Registry") -> List[str]:
        return [
            f"Commands are bound to unregistered state '{name}'"
            for name in registry.bound_state_names()
            if not registry.is_registered(name)
        ]
