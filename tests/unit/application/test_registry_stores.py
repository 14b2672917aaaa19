"""Unit tests for the typed registry collection wrappers."""

import pytest

from src.application.services.registry_stores import (
    IdentityRecordStore,
    OwnershipIndex,
    TokenURIStore,
    UniquenessIndex,
)
from src.domain.models import StudentRecord
from src.infrastructure.adapters import InMemoryOrderedStore
from tests.helpers import make_application


def _record(external_id: str = "2021/0001") -> StudentRecord:
    return StudentRecord.from_application(
        make_application(external_id=external_id), image_url="img"
    )


class TestIdentityRecordStore:
    def test_put_returns_previous(self) -> None:
        store = IdentityRecordStore(InMemoryOrderedStore("records"))
        first = _record()

        assert store.put(first) is None
        assert store.put(first.with_year(2)) == first
        assert store.get("2021/0001").year == 2  # type: ignore[union-attr]

    def test_restore_removes_first_write(self) -> None:
        store = IdentityRecordStore(InMemoryOrderedStore("records"))
        previous = store.put(_record())

        store.restore("2021/0001", previous)

        assert not store.contains("2021/0001")
        assert len(store) == 0

    def test_records_in_token_order(self) -> None:
        store = IdentityRecordStore(InMemoryOrderedStore("records"))
        store.put(_record("2022/0001"))
        store.put(_record("2021/0002"))

        assert [r.external_id for r in store.records()] == ["2021/0002", "2022/0001"]


class TestOwnershipIndex:
    def test_balance_counts_holder_tokens(self) -> None:
        index = OwnershipIndex(InMemoryOrderedStore("ownership"))
        index.assign("t1", "0xA")
        index.assign("t2", "0xB")
        index.assign("t3", "0xA")

        assert index.balance_of("0xA") == 2
        assert index.balance_of("0xC") == 0

    def test_release(self) -> None:
        index = OwnershipIndex(InMemoryOrderedStore("ownership"))
        index.assign("t1", "0xA")

        index.release("t1")

        assert index.owner_of("t1") is None


class TestUniquenessIndex:
    def test_claim_and_lookup(self) -> None:
        index = UniquenessIndex(InMemoryOrderedStore("email_index"), "email")

        index.claim("john@raf.rs", "2021/0001")

        assert index.contains("john@raf.rs")
        assert index.token_for("john@raf.rs") == "2021/0001"

    def test_double_claim_rejected(self) -> None:
        index = UniquenessIndex(InMemoryOrderedStore("email_index"), "email")
        index.claim("john@raf.rs", "2021/0001")

        with pytest.raises(ValueError, match="already claimed"):
            index.claim("john@raf.rs", "2021/0002")


class TestTokenURIStore:
    def test_set_get_discard(self) -> None:
        uris = TokenURIStore(InMemoryOrderedStore("token_uris"))

        uris.set("t1", "https://img")
        assert uris.get("t1") == "https://img"

        uris.discard("t1")
        assert uris.get("t1") is None
