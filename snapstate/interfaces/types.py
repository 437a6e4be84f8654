# snapstate/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Dict, TypeVar

StateName = str
CommandName = str

# User-defined payload carried by a machine.
DataT = TypeVar("DataT")

# JSON-compatible structure produced by the payload codec.
JSONDict = Dict[str, Any]
