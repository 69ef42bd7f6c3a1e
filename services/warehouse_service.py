# services/warehouse_service.py
import logging
from datetime import date, timedelta

from data.exceptions import InventoryError
from data.store import KeyedEntityStore
from models.inventory import ElectronicItem, GroceryItem

logger = logging.getLogger("warehouse.inventory")


class WarehouseManager:
    # Keeps one store per item type. Store errors raised by the helpers
    # below are logged and reported through the return value, so a demo
    # run keeps going after a bad request.

    def __init__(self):
        self.electronics: KeyedEntityStore[ElectronicItem] = KeyedEntityStore()
        self.groceries: KeyedEntityStore[GroceryItem] = KeyedEntityStore()

    def seed_data(self, today: date | None = None) -> None:
        today = today or date.today()
        try:
            self.electronics.add_item(ElectronicItem(1, "Smartphone", 50, "Samsung", 24))
            self.electronics.add_item(ElectronicItem(2, "Laptop", 30, "Dell", 36))

            self.groceries.add_item(GroceryItem(101, "Milk", 200, today + timedelta(days=14)))
            self.groceries.add_item(GroceryItem(102, "Bread", 150, today + timedelta(days=7)))
        except InventoryError as e:
            logger.error(f"Error seeding data: {e}")

    def format_items(self, store: KeyedEntityStore, title: str) -> str:
        lines = [f"=== {title}s ==="]
        lines.extend(str(item) for item in store.get_all_items())
        return "\n".join(lines) + "\n"

    def increase_stock(self, store: KeyedEntityStore, item_id: int, quantity: int) -> bool:
        try:
            item = store.get_item_by_id(item_id)
            store.update_quantity(item_id, item.quantity + quantity)
        except InventoryError as e:
            logger.error(f"Error increasing stock: {e}")
            return False
        logger.info(f"Updated item {item_id}: added {quantity} units")
        return True

    def remove_item_by_id(self, store: KeyedEntityStore, item_id: int) -> bool:
        try:
            store.remove_item(item_id)
        except InventoryError as e:
            logger.error(f"Error removing item: {e}")
            return False
        logger.info(f"Removed item with ID {item_id}")
        return True

    def low_stock(self, store: KeyedEntityStore, threshold: int) -> list[tuple[int, int]]:
        # Alert for items with low stock.
        return [(item.id, item.quantity) for item in store.get_all_items() if item.quantity <= threshold]
