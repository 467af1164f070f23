"""Provider – Resource port implemented by every managed resource type."""
from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any, ClassVar

from stripe_webhooks.provider.diagnostics import Diagnostics
from stripe_webhooks.provider.resource_data import ResourceData
from stripe_webhooks.provider.schema import Schema


class Resource(abc.ABC):
    """Create/read/update/delete contract invoked by the orchestration host.

    Every operation receives the :class:`ResourceData` for the resource and
    an explicit API client, and reports failures as diagnostics.
    """

    name: ClassVar[str]
    schema: ClassVar[Schema]

    def new_data(
        self,
        config: Mapping[str, Any] | None = None,
        state: Mapping[str, Any] | None = None,
        id: str = "",  # noqa: A002
    ) -> ResourceData:
        return ResourceData(self.schema, config=config, state=state, id=id)

    @abc.abstractmethod
    def create(self, d: ResourceData, client: Any) -> Diagnostics: ...

    @abc.abstractmethod
    def read(self, d: ResourceData, client: Any) -> Diagnostics: ...

    @abc.abstractmethod
    def update(self, d: ResourceData, client: Any) -> Diagnostics: ...

    @abc.abstractmethod
    def delete(self, d: ResourceData, client: Any) -> Diagnostics: ...


__all__ = ["Resource"]
