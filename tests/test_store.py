import sqlite3

import pytest
from pydantic import ValidationError

from todoapp.core.errors import ConstraintViolation, StorageUnavailable
from todoapp.db.models.todo_items import TodoItemRow
from todoapp.db.store import TodoStore
from todoapp.domain.schemas import TodoItem


def test_open_creates_file_in_directory(tmp_path):
    directory = tmp_path / "nested" / "app-data"
    with TodoStore.open(directory) as store:
        assert store.path == directory / "TodoSQLite.db3"
        assert store.path.exists()
        assert store.list_all() == []


def test_walkthrough_scenario(store):
    first = TodoItem(name="Learn X", notes="Attend Y", done=True)
    assert store.save(first) == 1
    assert store.save(TodoItem(name="Second")) == 2

    assert store.get(1) == first.model_copy(update={"id": 1})
    assert store.delete(1) == 1
    assert store.get(1) is None
    assert store.list_all() == [TodoItem(id=2, name="Second", notes="", done=False)]


def test_save_new_item_assigns_positive_id_and_roundtrips(store):
    item = TodoItem(name="Buy milk", notes="2 litres")
    new_id = store.save(item)

    assert new_id > 0
    assert store.get(new_id) == item.model_copy(update={"id": new_id})


def test_save_existing_item_updates_in_place(store):
    item_id = store.save(TodoItem(name="Draft"))
    store.save(TodoItem(name="Other"))

    edited = TodoItem(id=item_id, name="Final", notes="reviewed", done=True)
    assert store.save(edited) == item_id

    assert store.count() == 2
    assert store.get(item_id) == edited


def test_save_with_unknown_id_echoes_id_and_creates_nothing(store):
    ghost = TodoItem(id=42, name="Ghost")

    assert store.save(ghost) == 42
    assert store.count() == 0
    assert store.get(42) is None


def test_update_reports_affected_rows(store):
    item_id = store.save(TodoItem(name="Task"))

    assert store.update(TodoItem(id=item_id, name="Task", done=True)) == 1
    assert store.update(TodoItem(id=item_id + 100, name="Nope")) == 0


def test_insert_ignores_incoming_id(store):
    existing = store.save(TodoItem(name="A"))
    new_id = store.insert(TodoItem(id=existing, name="B"))

    assert new_id != existing
    assert store.count() == 2


def test_delete_missing_id_is_noop(store):
    store.save(TodoItem(name="Keep me"))
    before = store.list_all()

    assert store.delete(999) == 0
    assert store.list_all() == before


def test_ids_are_not_reused_after_delete(store):
    store.save(TodoItem(name="a"))
    last = store.save(TodoItem(name="b"))
    store.delete(last)

    assert store.save(TodoItem(name="c")) > last


def test_list_pending_is_undone_subset_of_list_all(store):
    store.save(TodoItem(name="done", done=True))
    store.save(TodoItem(name="todo 1"))
    store.save(TodoItem(name="done too", done=True))
    store.save(TodoItem(name="todo 2"))

    everything = store.list_all()
    pending = store.list_pending()

    assert pending == [i for i in everything if not i.done]
    assert [i.name for i in pending] == ["todo 1", "todo 2"]


def test_list_pending_follows_updates(store):
    item_id = store.save(TodoItem(name="x"))
    assert len(store.list_pending()) == 1

    store.save(TodoItem(id=item_id, name="x", done=True))
    assert store.list_pending() == []


def test_returned_items_are_snapshots(store):
    item_id = store.save(TodoItem(name="snap"))
    item = store.get(item_id)

    with pytest.raises(ValidationError):
        item.done = True

    store.save(item.model_copy(update={"done": True}))
    assert item.done is False
    assert store.get(item_id).done is True


def test_data_survives_reopen(tmp_path):
    with TodoStore.open(tmp_path) as store:
        item_id = store.save(TodoItem(name="persistent", notes="n"))

    with TodoStore.open(tmp_path) as store:
        assert store.get(item_id) == TodoItem(id=item_id, name="persistent", notes="n")


def test_closed_store_is_unavailable(tmp_path):
    store = TodoStore.open(tmp_path)
    store.close()

    assert store.is_available is False
    with pytest.raises(StorageUnavailable):
        store.list_all()
    with pytest.raises(StorageUnavailable):
        store.save(TodoItem(name="late"))


def test_open_fails_when_directory_is_a_file(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")

    with pytest.raises(StorageUnavailable):
        TodoStore.open(blocker)


def test_open_fails_on_corrupted_file(tmp_path):
    (tmp_path / "TodoSQLite.db3").write_bytes(b"this is definitely not an sqlite database" * 100)

    with pytest.raises(StorageUnavailable):
        TodoStore.open(tmp_path)


def test_constraint_violation_leaves_no_partial_write(store):
    # insert() ignore l'id et update() ne vise qu'une ligne existante : aucune
    # opération publique ne viole la clé primaire, on passe par la session interne.
    item_id = store.save(TodoItem(name="original"))

    with pytest.raises(ConstraintViolation):
        with store._session() as session:
            session.add(TodoItemRow(name="extra"))
            session.add(TodoItemRow(id=item_id, name="duplicate"))
            session.commit()

    assert store.list_all() == [TodoItem(id=item_id, name="original")]
    assert store.is_available is True


@pytest.mark.parametrize("dirname", ["with?query", "hash#tag", "pct%41dir"])
def test_directory_name_is_used_verbatim(tmp_path, dirname):
    directory = tmp_path / dirname
    with TodoStore.open(directory) as store:
        item_id = store.save(TodoItem(name="here"))
        assert store.path == directory / "TodoSQLite.db3"
        assert store.path.exists()

    assert sorted(p.name for p in tmp_path.iterdir()) == [dirname]
    with TodoStore.open(directory) as store:
        assert store.get(item_id).name == "here"


def test_connection_failure_makes_store_unavailable(tmp_path):
    store = TodoStore.open(tmp_path)
    store.save(TodoItem(name="soon gone"))
    with sqlite3.connect(store.path) as conn:
        conn.execute('DROP TABLE "TodoItem"')

    with pytest.raises(StorageUnavailable):
        store.list_all()

    assert store.is_available is False
    with pytest.raises(StorageUnavailable):
        store.get(1)
    with pytest.raises(StorageUnavailable):
        store.save(TodoItem(name="late"))
    with pytest.raises(StorageUnavailable):
        store.delete(1)
