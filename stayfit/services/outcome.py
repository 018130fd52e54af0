"""Typed outcome of a console operation."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class OperationResult:
    """What the menu loop logs and shows after each action."""

    name: str
    ok: bool
    message: str
    counts: dict[str, int] = field(default_factory=dict)
    error: BaseException | None = None

    @classmethod
    def success(cls, name: str, message: str, counts: dict[str, int] | None = None) -> "OperationResult":
        return cls(name=name, ok=True, message=message, counts=dict(counts or {}))

    @classmethod
    def failure(cls, name: str, error: BaseException, message: str | None = None) -> "OperationResult":
        return cls(name=name, ok=False, message=message or f"An error occurred: {error}", error=error)
