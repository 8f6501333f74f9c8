import sys, pathlib
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

import pytest

from positions.calculators import make_fee_config, no_fees
from services.storage import LocalStorage, MemoryStorage, StorageService
from services.state_store import StateStore


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    # keep settings deterministic regardless of the developer's shell
    for name in (
        "STOCK_CALC_STORAGE_PATH",
        "STOCK_CALC_DISABLE_STORAGE",
        "STOCK_CALC_BUY_FEE",
        "STOCK_CALC_SELL_FEE",
        "STOCK_CALC_PROFIT_STEPS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fees_off():
    return no_fees()


@pytest.fixture
def two_lots():
    return [{"price": "100", "quantity": "10"}, {"price": "200", "quantity": "10"}]


@pytest.fixture
def buy_fee_10():
    return make_fee_config(True, 10, False, 0)


@pytest.fixture
def memory_store():
    return StateStore(StorageService(MemoryStorage()))


@pytest.fixture
def file_storage(tmp_path):
    return LocalStorage(tmp_path / "data" / "storage.json")
