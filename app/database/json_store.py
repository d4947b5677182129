"""JSON document store management"""

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.config import settings
from app.exceptions import StorageException

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=BaseModel)


class JsonStore:
    """
    Key-value store of JSON documents, one file per document name.

    Reads never fail: a missing or unreadable document yields the caller's
    default. Writes go to a temporary sibling file that is then renamed over
    the target, so readers never observe a half-written document. There is
    no locking; concurrent read-modify-write cycles lose updates.
    """

    def __init__(self, data_dir: str):
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / name

    def read(self, name: str, default: Any) -> Any:
        """
        Load a raw JSON value

        Args:
            name: Document file name (e.g. "events.json")
            default: Value returned when the file is missing or corrupt

        Returns:
            Parsed JSON value or default
        """
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            return default
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable document {path}, using default: {str(e)}")
            return default

    def write(self, name: str, data: Any) -> None:
        """Persist a JSON value, replacing the previous document atomically"""
        path = self.path_for(name)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(data, ensure_ascii=False, indent=2)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path.exists():
                tmp_path.unlink()
            logger.error(f"Failed to write document {path}: {str(e)}")
            raise StorageException(f"Failed to write {name}: {str(e)}") from e
        logger.debug(f"Wrote document {path} ({len(payload)} chars)")

    def load(self, name: str, model: Type[DocumentT]) -> DocumentT:
        """Load a typed document; the model's empty default on missing or invalid data"""
        raw = self.read(name, None)
        if raw is None:
            return model()
        try:
            return model.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                f"Document {name} failed validation, using empty default: "
                f"{e.error_count()} error(s)"
            )
            return model()

    def save(self, name: str, document: BaseModel) -> None:
        """Persist a typed document"""
        self.write(name, document.model_dump(mode="json", by_alias=True))


@lru_cache
def _store_for(data_dir: str) -> JsonStore:
    return JsonStore(data_dir)


def get_store() -> JsonStore:
    """Document store dependency"""
    return _store_for(settings.DATA_DIR)
