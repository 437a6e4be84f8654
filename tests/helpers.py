# tests/helpers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass, field
from typing import List


@dataclass
class Payload:
    """Small payload used across the unit tests."""

    count: int = 0
    notes: List[str] = field(default_factory=list)
