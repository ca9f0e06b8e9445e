# VouchBot/scripts/store.py

import json
from dataclasses import dataclass, asdict
from pathlib import Path

from VouchBot.scripts.log import log

BASE_DIR = Path(__file__).resolve().parents[1]
DATA_DIR = BASE_DIR / "data"

STORE_FILENAME = "information.json"


class StoreParseError(ValueError):
    pass


@dataclass
class VouchRecord:
    id: int
    author: str
    authorId: str
    avatar: str
    rating: int
    review: str
    timestamp: str
    attachment: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "VouchRecord":
        return cls(
            id=int(data["id"]),
            author=data["author"],
            authorId=str(data["authorId"]),
            avatar=data["avatar"],
            rating=int(data["rating"]),
            review=data["review"],
            timestamp=data["timestamp"],
            attachment=data.get("attachment"),
        )

    def to_dict(self) -> dict:
        return asdict(self)


class VouchStore:
    """Flat JSON array of vouch records, rewritten whole on every append.

    There is no locking: two appends that interleave can both read the same
    contents and the later write wins.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else DATA_DIR / STORE_FILENAME

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> list[VouchRecord]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            log("store", f"Failed to read {self.path.name}: {e}")
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StoreParseError(f"{self.path.name} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise StoreParseError(f"{self.path.name} does not contain a JSON array")

        try:
            return [VouchRecord.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise StoreParseError(f"{self.path.name} holds a malformed record: {e}") from e

    def next_id(self) -> int:
        return len(self.load()) + 1

    def append(self, record: VouchRecord):
        records = self.load()
        records.append(record)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump([r.to_dict() for r in records], f, indent=2, ensure_ascii=False)
