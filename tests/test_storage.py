import json

from services.storage import LocalStorage, MemoryStorage, StorageService


def test_local_storage_round_trip(file_storage):
    assert not file_storage.exists()
    assert file_storage.get_raw("purchases") is None

    file_storage.set_raw("purchases", "[]")
    file_storage.set_raw("desiredPrice", '"12"')

    reopened = LocalStorage(file_storage.file_path)
    assert reopened.get_raw("purchases") == "[]"
    assert reopened.get_raw("desiredPrice") == '"12"'
    assert not file_storage.file_path.with_suffix(".json.tmp").exists()


def test_local_storage_remove_and_clear(file_storage):
    file_storage.set_raw("a", "1")
    file_storage.set_raw("b", "2")
    file_storage.remove("a")
    assert file_storage.load() == {"b": "2"}
    file_storage.clear()
    assert file_storage.load() == {}


def test_local_storage_corrupt_file_reads_empty(file_storage):
    file_storage.file_path.parent.mkdir(parents=True)
    file_storage.file_path.write_text("{not json", encoding="utf-8")
    assert file_storage.load() == {}


def test_local_storage_mtime(file_storage):
    assert file_storage.get_mtime() == "(not created yet)"
    file_storage.set_raw("a", "1")
    assert file_storage.get_mtime() != "(not created yet)"


def test_service_returns_default_for_missing_key():
    service = StorageService(MemoryStorage())
    assert service.get("customProfit", "") == ""
    assert service.get("purchases", None) is None


def test_service_encodes_values_as_json():
    backend = MemoryStorage()
    service = StorageService(backend)
    service.set("desiredPrice", "")
    assert backend.get_raw("desiredPrice") == '""'
    assert service.get("desiredPrice", "x") == ""


def test_service_corrupt_value_falls_back_and_warns():
    service = StorageService(MemoryStorage({"purchases": "[oops"}))
    assert service.get("purchases", "default") == "default"
    assert "purchases" in service.get_last_warning()


def test_service_remove_and_clear():
    service = StorageService(MemoryStorage())
    service.set("a", 1)
    service.set("b", [1, 2])
    service.remove("a")
    assert service.get("a") is None
    assert service.get("b") == [1, 2]
    service.clear()
    assert service.get("b") is None


def test_service_over_local_file(file_storage):
    service = StorageService(file_storage)
    service.set("purchases", [{"price": "1", "quantity": ""}])
    data = json.loads(file_storage.file_path.read_text(encoding="utf-8"))
    assert json.loads(data["purchases"]) == [{"price": "1", "quantity": ""}]
