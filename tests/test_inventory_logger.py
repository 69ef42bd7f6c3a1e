import json
import logging
from datetime import datetime

import pytest

from data.repository import DataRepository
from models.inventory import InventoryRecord
from services.inventory_logger import InventoryLogger, format_records, seed_sample_records

NOW = datetime(2026, 10, 18, 8, 0)


@pytest.fixture
def repo(tmp_path):
    return DataRepository(tmp_path / "storage")


def test_save_then_load_in_new_instance(repo):
    first = InventoryLogger(repo)
    seed_sample_records(first, now=NOW)
    assert first.save_to_file() is True

    second = InventoryLogger(repo)
    assert second.load_from_file() is True
    assert second.get_all() == first.get_all()
    assert second.get_all()[0].date_added == datetime(2026, 9, 18, 8, 0)


def test_saved_file_is_indented_json(repo):
    inv = InventoryLogger(repo, "items.json")
    inv.add(InventoryRecord(1, "Laptop", 10, NOW))
    inv.save_to_file()

    text = (repo.storage_dir / "items.json").read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    assert json.loads(text) == [
        {"id": 1, "name": "Laptop", "quantity": 10, "date_added": "2026-10-18T08:00:00"}
    ]


def test_load_missing_file_keeps_list(repo, caplog):
    caplog.set_level(logging.INFO, logger="warehouse")
    inv = InventoryLogger(repo)
    inv.add(InventoryRecord(1, "Laptop", 10, NOW))
    assert inv.load_from_file() is False
    assert len(inv.get_all()) == 1
    assert "No existing data file found." in caplog.text


def test_load_malformed_json_is_logged(repo, caplog):
    caplog.set_level(logging.INFO, logger="warehouse")
    (repo.storage_dir / "inventory.json").write_text("[{oops", encoding="utf-8")
    inv = InventoryLogger(repo)
    inv.add(InventoryRecord(1, "Laptop", 10, NOW))

    assert inv.load_from_file() is False
    assert "Error parsing JSON" in caplog.text
    assert len(inv.get_all()) == 1


def test_load_wrong_shape_is_logged(repo, caplog):
    caplog.set_level(logging.INFO, logger="warehouse")
    repo.write_json("inventory.json", [{"id": 1, "name": "Laptop"}])
    assert InventoryLogger(repo).load_from_file() is False
    assert "Error loading from file" in caplog.text


def test_save_failure_is_logged(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="warehouse")
    repo = DataRepository(tmp_path)
    # a directory where the file should be makes open() fail
    (tmp_path / "inventory.json").mkdir()
    assert InventoryLogger(repo).save_to_file() is False
    assert "Error saving to file" in caplog.text


def test_repository_read_json(repo):
    assert repo.read_json("absent.json") is None
    (repo.storage_dir / "empty.json").write_text("  \n", encoding="utf-8")
    assert repo.read_json("empty.json") is None
    repo.write_json("obj.json", {"a": 1})
    assert repo.read_json("obj.json") == {"a": 1}
    with pytest.raises(ValueError):
        repo.get_inventory_records("obj.json")


def test_format_records():
    text = format_records([InventoryRecord(4, "Mouse", 50, NOW)])
    assert text.splitlines() == ["=== Current Inventory ===", "[4] Mouse - Qty: 50 (Added: 2026-10-18)"]
