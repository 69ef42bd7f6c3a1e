# data/exceptions.py
# Errors raised by KeyedEntityStore. Callers catch InventoryError
# when they only care that a store operation failed.


class InventoryError(Exception):
    pass


class DuplicateItemError(InventoryError):
    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Item with ID {item_id} already exists.")


class ItemNotFoundError(InventoryError):
    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Item with ID {item_id} not found.")


class InvalidQuantityError(InventoryError):
    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__("Quantity cannot be negative.")
