from positions.lots import default_lots
from services import config
from services.state_store import StateStore, STORAGE_KEYS, open_state_store
from services.storage import LocalStorage, MemoryStorage, StorageService


def test_defaults_when_nothing_stored(memory_store):
    assert memory_store.load_purchases() == default_lots()
    assert memory_store.load_custom_profit() == ""
    assert memory_store.load_desired_price() == ""


def test_purchases_round_trip_preserves_strings(memory_store):
    lots = [
        {"price": "100", "quantity": ""},
        {"price": "", "quantity": ""},
        {"price": "0.5000", "quantity": "12abc"},
    ]
    memory_store.save_purchases(lots)
    assert memory_store.load_purchases() == lots


def test_text_inputs_round_trip(memory_store):
    memory_store.save_custom_profit("7.5")
    memory_store.save_desired_price("")
    assert memory_store.load_custom_profit() == "7.5"
    assert memory_store.load_desired_price() == ""


def test_round_trip_through_reloaded_file(file_storage):
    lots = [{"price": "10", "quantity": "3"}]
    StateStore(StorageService(file_storage)).save_purchases(lots)

    reloaded = StateStore(StorageService(LocalStorage(file_storage.file_path)))
    assert reloaded.load_purchases() == lots


def test_empty_stored_list_gives_default_lots():
    backend = MemoryStorage({STORAGE_KEYS["PURCHASES"]: "[]"})
    assert StateStore(StorageService(backend)).load_purchases() == default_lots()


def test_reset_forgets_values(memory_store):
    memory_store.save_custom_profit("3")
    memory_store.save_purchases([{"price": "1", "quantity": "1"}])
    memory_store.reset()
    assert memory_store.load_custom_profit() == ""
    assert memory_store.load_purchases() == default_lots()


def test_open_state_store_uses_local_file(monkeypatch, tmp_path):
    monkeypatch.setenv("STOCK_CALC_STORAGE_PATH", str(tmp_path / "s.json"))
    store = open_state_store()
    assert isinstance(store.storage.backend, LocalStorage)
    assert store.storage.backend.file_path == (tmp_path / "s.json").resolve()


def test_open_state_store_in_memory_when_disabled(monkeypatch):
    monkeypatch.setenv("STOCK_CALC_DISABLE_STORAGE", "1")
    assert config.storage_disabled()
    assert isinstance(open_state_store().storage.backend, MemoryStorage)
