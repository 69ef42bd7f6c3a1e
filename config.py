# config.py
# Paths and defaults shared by the demo programs.
import os
from pathlib import Path

# JSON files written by DataRepository
DATA_DIR = Path(os.environ.get("WAREHOUSE_DATA_DIR", "data/storage"))

# daily rotating log files
LOG_DIR = Path(os.environ.get("WAREHOUSE_LOG_DIR", "data/logs"))
LOG_FILENAME = "warehouse.log"
LOG_BACKUP_DAYS = 7

INVENTORY_FILENAME = "inventory.json"

# grading demo: "id,name,score" per line in, text report out
STUDENTS_INPUT = "students.txt"
GRADE_REPORT_OUTPUT = "grade_report.txt"

LOW_STOCK_THRESHOLD = 5
