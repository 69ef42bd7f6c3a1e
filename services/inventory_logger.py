# services/inventory_logger.py
import json
import logging
from datetime import datetime, timedelta

from config import INVENTORY_FILENAME
from data.repository import DataRepository
from models.inventory import InventoryRecord

logger = logging.getLogger("warehouse.records")


class InventoryLogger:
    """
    Append-only list of inventory records that can be saved to and loaded
    from a JSON file.

    Saving and loading are fire-and-forget: failures are logged and reported
    through the return value, never raised. A failed load leaves the
    in-memory list as it was.
    """

    def __init__(self, repo: DataRepository, filename: str = INVENTORY_FILENAME):
        self.repo = repo
        self.filename = filename
        self._log: list[InventoryRecord] = []

    def add(self, record: InventoryRecord) -> None:
        self._log.append(record)

    def get_all(self) -> list[InventoryRecord]:
        return list(self._log)

    def save_to_file(self) -> bool:
        try:
            self.repo.save_inventory_records(self.filename, [r.to_dict() for r in self._log])
        except OSError as e:
            logger.error(f"Error saving to file: {e}")
            return False
        logger.info(f"Successfully saved {len(self._log)} items to {self.repo.file_path(self.filename)}")
        return True

    def load_from_file(self) -> bool:
        try:
            data = self.repo.get_inventory_records(self.filename)
            if data is None:
                logger.info("No existing data file found.")
                return False
            records = [InventoryRecord.from_dict(item) for item in data]
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing JSON: {e}")
            return False
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Error loading from file: {e}")
            return False

        self._log = records
        logger.info(f"Successfully loaded {len(records)} items from {self.repo.file_path(self.filename)}")
        return True


def seed_sample_records(inventory_logger: InventoryLogger, now: datetime | None = None) -> None:
    now = now or datetime.now()
    inventory_logger.add(InventoryRecord(1, "Laptop", 10, now - timedelta(days=30)))
    inventory_logger.add(InventoryRecord(2, "Monitor", 15, now - timedelta(days=15)))
    inventory_logger.add(InventoryRecord(3, "Keyboard", 25, now - timedelta(days=7)))
    inventory_logger.add(InventoryRecord(4, "Mouse", 50, now - timedelta(days=3)))
    inventory_logger.add(InventoryRecord(5, "Headphones", 20, now))
    logger.info("Added 5 sample inventory items")


def format_records(records: list[InventoryRecord]) -> str:
    lines = ["=== Current Inventory ==="]
    for r in records:
        lines.append(f"[{r.id}] {r.name} - Qty: {r.quantity} (Added: {r.date_added:%Y-%m-%d})")
    return "\n".join(lines)
