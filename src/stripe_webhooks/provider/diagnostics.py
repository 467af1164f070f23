"""Provider – diagnostics returned to the orchestration host."""
from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from stripe_webhooks.kernel.errors import BaseError, ProjectionError


class Severity(str, enum.Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """One ``(severity, message)`` entry; an empty list means success."""

    severity: Severity
    summary: str
    detail: str = ""
    attribute: str | None = None

    @classmethod
    def error(cls, summary: str, *, detail: str = "", attribute: str | None = None) -> "Diagnostic":
        return cls(Severity.ERROR, summary, detail, attribute)


type Diagnostics = list[Diagnostic]


class AttributeSetter(Protocol):
    def set(self, key: str, value: Any) -> None: ...


def from_error(exc: BaseException) -> Diagnostics:
    """Wrap *exc* into a single error diagnostic, message verbatim."""
    detail = exc.code if isinstance(exc, BaseError) else ""
    attribute = getattr(exc, "key", None) or getattr(exc, "field", None)
    return [Diagnostic.error(str(exc), detail=detail, attribute=attribute)]


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity is Severity.ERROR for d in diagnostics)


def set_all(d: AttributeSetter, values: Mapping[str, Any]) -> Diagnostics:
    """Write every value into *d*, collecting one diagnostic per failure.

    A failing attribute does not stop the remaining ones from being written.
    """
    diagnostics: Diagnostics = []
    for key, value in values.items():
        try:
            d.set(key, value)
        except ProjectionError as exc:
            diagnostics.extend(from_error(exc))
    return diagnostics


__all__ = [
    "AttributeSetter",
    "Diagnostic",
    "Diagnostics",
    "Severity",
    "from_error",
    "has_errors",
    "set_all",
]
