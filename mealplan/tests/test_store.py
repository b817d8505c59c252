import json
import pytest
from unittest import mock
from mealplan.domain.errors import PersistenceError
from mealplan.infra.Store import JsonStore


def test_missing_file_is_an_empty_catalog(store):
    doc = store.snapshot()
    assert doc["recipes"] == []
    assert doc["sequences"]["meal_plans"] == 0


def test_transaction_commits_and_assigns_ids(store):
    with store.transaction() as tx:
        first = tx.insert("ingredients", {"name": "Rice"})
        second = tx.insert("ingredients", {"name": "Beans"})
    assert (first["id"], second["id"]) == (1, 2)
    assert [row["name"] for row in store.snapshot()["ingredients"]] == ["Rice", "Beans"]
    with open(store.path, encoding="utf-8") as f:
        assert json.load(f)["sequences"]["ingredients"] == 2


def test_exception_rolls_back_everything(store):
    with store.transaction() as tx:
        tx.insert("ingredients", {"name": "Rice"})
    with pytest.raises(RuntimeError):
        with store.transaction() as tx:
            tx.insert("ingredients", {"name": "Beans"})
            tx.update("ingredients", 1, name="Brown rice")
            raise RuntimeError("interrupted")
    doc = store.snapshot()
    assert [row["name"] for row in doc["ingredients"]] == ["Rice"]
    assert doc["sequences"]["ingredients"] == 1


def test_failed_write_keeps_previous_file(store):
    with store.transaction() as tx:
        tx.insert("ingredients", {"name": "Rice"})
    with mock.patch("mealplan.infra.Store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(PersistenceError):
            with store.transaction() as tx:
                tx.insert("ingredients", {"name": "Beans"})
    assert len(store.snapshot()["ingredients"]) == 1
    assert [p.name for p in store.path.parent.iterdir()] == ["catalog.json"]


def test_corrupted_file_raises_persistence_error(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PersistenceError):
        JsonStore(path).snapshot()


def test_sequences_recovered_from_rows(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"recipes": [{"id": 7, "name": "Stew"}]}), encoding="utf-8")
    store = JsonStore(path)
    with store.transaction() as tx:
        row = tx.insert("recipes", {"name": "Chili"})
    assert row["id"] == 8
