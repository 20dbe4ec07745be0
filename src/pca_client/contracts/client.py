"""GraphQL execution client contract."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from pca_client.contracts.exceptions import ResponseMappingError
from pca_client.contracts.request import GraphQLRequest, GraphQLResponse

T = TypeVar("T")


class GraphQLClient(ABC):
    """Issues GraphQL requests against a single endpoint.

    Cancellation follows asyncio: cancelling the awaiting task cancels the
    in-flight request and ``CancelledError`` propagates to the caller.
    """

    async def __aenter__(self) -> GraphQLClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:  # noqa: B027
        """Release transport resources. No-op by default."""

    @property
    @abstractmethod
    def timeout(self) -> float | None: ...  # pragma: no cover

    @timeout.setter
    @abstractmethod
    def timeout(self, value: float | None) -> None: ...  # pragma: no cover

    @abstractmethod
    async def execute(self, request: GraphQLRequest) -> GraphQLResponse: ...  # pragma: no cover

    @abstractmethod
    async def schema(self) -> dict[str, Any]: ...  # pragma: no cover

    async def execute_typed(self, request: GraphQLRequest, model: type[T]) -> T:
        """Execute *request* and validate its ``data`` payload as *model*."""
        response = await self.execute(request)
        try:
            return TypeAdapter(model).validate_python(response.data)
        except ValidationError as exc:
            raise ResponseMappingError(f"Unable to map response data to {model!r}: {exc}") from exc

    def execute_sync(self, request: GraphQLRequest) -> GraphQLResponse:
        """Blocking variant of :meth:`execute` for callers without an event loop.

        Runs :meth:`execute` on a fresh event loop per call. Clients that keep
        loop-bound connections override this with a blocking transport.
        """
        return asyncio.run(self.execute(request))
