import json
from pathlib import Path

from config import DATA_DIR


class DataRepository:
    def __init__(self, storage_dir: Path | None = None):
        # base folder where all JSON data lives
        self.storage_dir = Path(storage_dir) if storage_dir is not None else DATA_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def read_json(self, filename: str):
        # Load JSON from disk. Missing or empty file -> None.
        # Decode and OS errors go to the caller, which decides how loud to be.
        path = self.file_path(filename)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            text = f.read().strip()
        if text == "":
            return None
        return json.loads(text)

    def write_json(self, filename: str, data) -> None:
        # Save Python data structure back to JSON file with pretty formatting.
        path = self.file_path(filename)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get_inventory_records(self, filename: str) -> list[dict] | None:
        # None when nothing has been saved yet
        data = self.read_json(filename)
        if data is None:
            return None
        if not isinstance(data, list):
            raise ValueError(f"{filename}: expected a JSON list, got {type(data).__name__}")
        return data

    def save_inventory_records(self, filename: str, records: list[dict]) -> None:
        self.write_json(filename, records)
