"""
Rule building blocks shared by the matcher stages.

Every stage is an ordered tuple of frozen rule objects, so the evaluation
order is visible in one place and each rule can be tested on its own.
"""

from dataclasses import dataclass
from typing import Callable, Union

from ..core.types import FileNode


@dataclass(frozen=True)
class StaticReason:
    """Fixed justification text."""

    text: str

    def render(self, node: FileNode) -> str:
        return self.text


@dataclass(frozen=True)
class ComputedReason:
    """Justification built from the matched node."""

    build: Callable[[FileNode], str]

    def render(self, node: FileNode) -> str:
        return self.build(node)


Reason = Union[StaticReason, ComputedReason]
