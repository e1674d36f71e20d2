from __future__ import annotations

from typing import Any, Dict, Protocol


class Node(Protocol):
    name: str
    def run(self, ctx: Dict[str, Any]) -> Dict[str, Any]: ...
