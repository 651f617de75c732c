"""Unit tests for registry/store.py -- the in-memory developer registry.

Covers:
- list_developers() order and idempotence
- create() id assignment, client id discarded, uniqueness under a frozen clock
- get() round trip and DeveloperNotFound
- update() merge law, in-place replacement, literal id override
- delete() then get()
- concurrent creates from many threads
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from registry.models import Developer
from registry.store import DeveloperNotFound, DeveloperRegistry


class TestCreateAndList:
    def test_empty_registry_lists_nothing(self, registry):
        assert registry.list_developers() == []

    def test_list_is_idempotent(self, registry):
        registry.create({"name": "Ana"})
        registry.create({"name": "Bo"})
        assert registry.list_developers() == registry.list_developers()

    def test_list_preserves_insertion_order(self, registry):
        names = ["Ana", "Bo", "Cy"]
        for name in names:
            registry.create({"name": name})
        assert [d.name for d in registry.list_developers()] == names

    def test_create_assigns_id_and_keeps_fields(self, registry):
        dev = registry.create({"name": "Ana", "email": "a@x.com", "skills": ["go"], "level": 3})
        assert dev.id.isdigit()
        assert dev.to_dict() == {
            "id": dev.id,
            "name": "Ana",
            "email": "a@x.com",
            "skills": ["go"],
            "level": 3,
        }

    def test_create_discards_client_id(self, registry):
        dev = registry.create({"id": "mine", "name": "Ana"})
        assert dev.id != "mine"
        with pytest.raises(DeveloperNotFound):
            registry.get("mine")

    def test_rapid_creates_have_distinct_ids(self, registry):
        ids = [registry.create({}).id for _ in range(500)]
        assert len(set(ids)) == 500

    def test_frozen_clock_still_yields_increasing_ids(self):
        registry = DeveloperRegistry(clock=lambda: 1_700_000_000_000)
        ids = [registry.create({}).id for _ in range(3)]
        assert ids == ["1700000000000", "1700000000001", "1700000000002"]

    def test_concurrent_creates_are_unique(self, registry):
        with ThreadPoolExecutor(max_workers=8) as pool:
            devs = list(pool.map(lambda i: registry.create({"n": i}), range(200)))
        assert len({d.id for d in devs}) == 200
        assert len(registry) == 200


class TestGet:
    def test_round_trip(self, registry):
        created = registry.create({"name": "Ana", "skills": ["go", "rust"]})
        assert registry.get(created.id).to_dict() == created.to_dict()

    def test_unknown_id_raises(self, registry):
        with pytest.raises(DeveloperNotFound):
            registry.get("nope")

    def test_id_match_is_exact_string(self, registry):
        dev = registry.create({})
        with pytest.raises(DeveloperNotFound):
            registry.get(f" {dev.id}")


class TestUpdate:
    def test_merge_law(self, registry):
        dev = registry.create({"b": 2})
        first = registry.update(dev.id, {"a": 1})
        assert first.to_dict() == {"id": dev.id, "a": 1, "b": 2}
        second = registry.update(dev.id, {"b": 3})
        assert second.to_dict() == {"id": dev.id, "a": 1, "b": 3}

    def test_known_fields_merge(self, registry):
        dev = registry.create({"name": "Ana", "email": "a@x.com"})
        updated = registry.update(dev.id, {"skills": ["python"]})
        assert updated.name == "Ana"
        assert updated.email == "a@x.com"
        assert updated.skills == ["python"]

    def test_position_unchanged(self, registry):
        first = registry.create({"name": "Ana"})
        middle = registry.create({"name": "Bo"})
        registry.create({"name": "Cy"})
        registry.update(middle.id, {"name": "Bob"})
        names = [d.name for d in registry.list_developers()]
        assert names == ["Ana", "Bob", "Cy"]
        assert registry.get(first.id).name == "Ana"

    def test_client_id_overrides_stored_id(self, registry):
        """Current behavior: merge order lets an incoming id replace the stored one."""
        dev = registry.create({"name": "Ana"})
        updated = registry.update(dev.id, {"id": "renamed"})
        assert updated.id == "renamed"
        assert registry.get("renamed").name == "Ana"
        with pytest.raises(DeveloperNotFound):
            registry.get(dev.id)

    def test_unknown_id_raises(self, registry):
        with pytest.raises(DeveloperNotFound):
            registry.update("nope", {"a": 1})


class TestDelete:
    def test_delete_then_get_raises(self, registry):
        dev = registry.create({"name": "Ana"})
        registry.delete(dev.id)
        with pytest.raises(DeveloperNotFound):
            registry.get(dev.id)

    def test_delete_removes_only_that_record(self, registry):
        keep = registry.create({"name": "Ana"})
        gone = registry.create({"name": "Bo"})
        registry.delete(gone.id)
        assert [d.id for d in registry.list_developers()] == [keep.id]

    def test_unknown_id_raises(self, registry):
        with pytest.raises(DeveloperNotFound):
            registry.delete("nope")

    def test_close_empties_registry(self, registry):
        registry.create({})
        registry.close()
        assert registry.list_developers() == []


class TestDeveloperModel:
    def test_unknown_fields_kept_in_extra(self):
        dev = Developer.from_dict({"id": "1", "name": "Ana", "github": "ana"})
        assert dev.extra == {"github": "ana"}
        assert dev.to_dict() == {"id": "1", "name": "Ana", "github": "ana"}

    def test_unset_known_fields_omitted(self):
        assert Developer(id="1").to_dict() == {"id": "1"}

    def test_null_values_kept(self):
        dev = Developer.from_dict({"id": "1", "email": None, "nickname": None})
        assert dev.to_dict() == {"id": "1", "email": None, "nickname": None}


class TestNullValues:
    def test_update_to_null_keeps_key(self, registry):
        dev = registry.create({"name": "Ana", "email": "a@x.com"})
        updated = registry.update(dev.id, {"email": None})
        assert updated.to_dict() == {"id": dev.id, "name": "Ana", "email": None}

    def test_create_keeps_null_extra(self, registry):
        dev = registry.create({"nickname": None})
        assert registry.get(dev.id).to_dict() == {"id": dev.id, "nickname": None}
