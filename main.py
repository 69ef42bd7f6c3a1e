import argparse
import sys

from config import GRADE_REPORT_OUTPUT, LOW_STOCK_THRESHOLD, STUDENTS_INPUT
from data.exceptions import DuplicateItemError, InvalidQuantityError, ItemNotFoundError
from data.repository import DataRepository
from models.inventory import ElectronicItem
from services.finance_service import FinanceApp
from services.grading_service import StudentResultProcessor
from services.health_service import HealthSystem
from services.inventory_logger import InventoryLogger, format_records, seed_sample_records
from services.warehouse_service import WarehouseManager
from utils.logger import setup_logger


def run_warehouse(args) -> int:
    manager = WarehouseManager()
    manager.seed_data()

    print(manager.format_items(manager.groceries, "GroceryItem"))
    print(manager.format_items(manager.electronics, "ElectronicItem"))

    print("=== Testing Exception Handling ===")
    try:
        manager.electronics.add_item(ElectronicItem(1, "Duplicate Phone", 10, "Apple", 12))
    except DuplicateItemError as e:
        print(f"Duplicate Test: {e}")

    try:
        manager.groceries.remove_item(999)
    except ItemNotFoundError as e:
        print(f"Non-existent Test: {e}")

    try:
        manager.groceries.update_quantity(101, -5)
    except InvalidQuantityError as e:
        print(f"Invalid Quantity Test: {e}")

    print("\n=== Testing Valid Operations ===")
    manager.increase_stock(manager.electronics, 2, 10)
    manager.remove_item_by_id(manager.groceries, 101)

    print("\n=== Updated Inventories ===")
    print(manager.format_items(manager.groceries, "GroceryItem"))
    print(manager.format_items(manager.electronics, "ElectronicItem"))

    low = manager.low_stock(manager.electronics, args.threshold) + manager.low_stock(manager.groceries, args.threshold)
    if low:
        print("Low stock: " + ", ".join(f"{item_id} ({qty})" for item_id, qty in low))
    return 0


def run_health(args) -> int:
    app = HealthSystem()
    app.seed_data()
    app.build_prescription_map()

    print(app.format_patients())
    first_patient_id = app.patients.get_all_items()[0].id
    print(app.format_prescriptions_for_patient(args.patient if args.patient is not None else first_patient_id))
    return 0


def run_grades(args) -> int:
    processor = StudentResultProcessor()
    try:
        students = processor.read_students_from_file(args.input)
    except FileNotFoundError:
        print(f"Error: Input file '{args.input}' not found.")
        return 1

    processor.write_report_to_file(students, args.output)
    print(f"Successfully processed {len(students)} students.")
    print(f"Report saved to: {args.output}")
    return 0


def run_finance(args) -> int:
    account = FinanceApp().run()
    print(f"Final balance: ${account.balance}")
    return 0


def run_inventory_log(args) -> int:
    repo = DataRepository(args.data_dir)
    inventory_logger = InventoryLogger(repo)
    seed_sample_records(inventory_logger)
    inventory_logger.save_to_file()

    print("\nSimulating application restart...\n")

    reloaded = InventoryLogger(repo)
    reloaded.load_from_file()
    print(format_records(reloaded.get_all()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Warehouse, health, grading and finance demo programs")
    parser.add_argument("--log-dir", default=None, help="directory for rotating log files")
    sub = parser.add_subparsers(dest="demo", required=True)

    p = sub.add_parser("warehouse", help="electronics and grocery inventory")
    p.add_argument("--threshold", type=int, default=LOW_STOCK_THRESHOLD)
    p.set_defaults(func=run_warehouse)

    p = sub.add_parser("health", help="patients and prescriptions")
    p.add_argument("--patient", type=int, default=None, help="patient id to list prescriptions for")
    p.set_defaults(func=run_health)

    p = sub.add_parser("grades", help="student grade report from a text file")
    p.add_argument("--input", default=STUDENTS_INPUT)
    p.add_argument("--output", default=GRADE_REPORT_OUTPUT)
    p.set_defaults(func=run_grades)

    p = sub.add_parser("finance", help="transactions against a savings account")
    p.set_defaults(func=run_finance)

    p = sub.add_parser("inventory-log", help="save inventory records to JSON and load them back")
    p.add_argument("--data-dir", default=None)
    p.set_defaults(func=run_inventory_log)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(args.log_dir)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
