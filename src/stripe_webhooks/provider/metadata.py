"""Provider – metadata reconciliation.

Stripe has no call that deletes a single metadata key: writing an empty
string to a key removes it. Turning an old metadata map into a new one
therefore means blanking every key that disappeared and writing every key
that is present in the new map.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from stripe_webhooks.kernel.types import to_map, to_string

TOMBSTONE = ""


class MetadataAdder(Protocol):
    def add_metadata(self, key: str, value: str) -> None: ...


class MetadataChange(Protocol):
    def get_change(self, key: str) -> tuple[Any, Any]: ...


def reconcile_metadata(
    old: Mapping[str, Any],
    new: Mapping[str, Any],
    adder: MetadataAdder,
) -> None:
    """Emit the writes that turn *old* into *new*.

    Keys only in *old* are written as :data:`TOMBSTONE` first, then every key
    of *new* is written with its value. Each key is emitted at most once.
    """
    stale = dict(old)
    for key in new:
        stale.pop(key, None)

    for key in stale:
        adder.add_metadata(key, TOMBSTONE)
    for key, value in new.items():
        adder.add_metadata(key, to_string(value))


def update_metadata(d: MetadataChange, adder: MetadataAdder, key: str = "metadata") -> None:
    """Reconcile the prior and declared values of the *key* attribute."""
    old, new = d.get_change(key)
    reconcile_metadata(to_map(old), to_map(new), adder)


__all__ = ["TOMBSTONE", "MetadataAdder", "reconcile_metadata", "update_metadata"]
