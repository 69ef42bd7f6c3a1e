# models/inventory.py
from dataclasses import dataclass
from datetime import date, datetime
# Inventory models: warehouse stock items and logged inventory records.

@dataclass
class ElectronicItem:
    id: int
    name: str
    quantity: int
    brand: str
    warranty_months: int

    def __str__(self) -> str:
        return (f"[{self.id}] {self.name} (Brand: {self.brand}, "
                f"Warranty: {self.warranty_months} months) - Qty: {self.quantity}")


@dataclass
class GroceryItem:
    id: int
    name: str
    quantity: int
    expiry_date: date

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} (Expires: {self.expiry_date:%Y-%m-%d}) - Qty: {self.quantity}"


@dataclass(frozen=True)
class InventoryRecord:
    id: int
    name: str
    quantity: int
    date_added: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "date_added": self.date_added.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "InventoryRecord":
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            quantity=int(data["quantity"]),
            date_added=datetime.fromisoformat(data["date_added"]),
        )
