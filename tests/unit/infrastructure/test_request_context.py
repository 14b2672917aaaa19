"""Unit tests for the per-request logging context."""

import asyncio
import uuid
from collections.abc import Iterator

import pytest

from src.infrastructure.observability.request_context import (
    RequestContext,
    bind_request,
    clear_request,
    current_request,
)


@pytest.fixture(autouse=True)
def unbind() -> Iterator[None]:
    clear_request()
    yield
    clear_request()


class TestBindRequest:
    def test_unbound_by_default(self) -> None:
        assert current_request() is None

    def test_keeps_supplied_correlation_id(self) -> None:
        context = bind_request("req-42", caller="admin-0")

        assert context == RequestContext(correlation_id="req-42", caller="admin-0")
        assert current_request() is context

    @pytest.mark.parametrize("incoming", [None, "", "   "])
    def test_generates_uuid4_when_missing(self, incoming: str | None) -> None:
        context = bind_request(incoming)

        assert uuid.UUID(context.correlation_id).version == 4

    def test_blank_caller_stored_as_none(self) -> None:
        assert bind_request("req-1", caller="").caller is None

    def test_clear(self) -> None:
        bind_request("req-1")

        clear_request()

        assert current_request() is None


class TestIsolation:
    def test_concurrent_requests_keep_their_own_context(self) -> None:
        results: dict[str, RequestContext | None] = {}

        async def handle(caller: str) -> None:
            bind_request(f"req-{caller}", caller=caller)
            await asyncio.sleep(0.01)
            results[caller] = current_request()

        async def run_all() -> None:
            await asyncio.gather(handle("admin-0"), handle("0xA"), handle("0xB"))

        asyncio.run(run_all())

        assert {caller: ctx.correlation_id for caller, ctx in results.items() if ctx} == {
            "admin-0": "req-admin-0",
            "0xA": "req-0xA",
            "0xB": "req-0xB",
        }
        assert all(ctx is not None and ctx.caller == caller for caller, ctx in results.items())
