"""JSON file implementation of the credential store port."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ...errors import StorageCorruptError, StorageIOError
from ...models.credentials import CredentialRecord
from ..application.ports import CredentialStorePort

logger = logging.getLogger(__name__)


class JsonCredentialStore(CredentialStorePort):
    """Keep every identity's credentials in a single pretty-printed JSON file.

    ``save`` is a read-modify-write of the whole mapping. Writers in other
    processes are not merged: whichever write lands last wins.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self, identity: str) -> Optional[CredentialRecord]:
        entry = self._read_all().get(identity)
        if entry is None:
            return None
        try:
            return CredentialRecord.model_validate(entry)
        except ValidationError as exc:
            raise StorageCorruptError(
                f"Invalid credentials for {identity!r} in {self._path}"
            ) from exc

    def save(self, identity: str, record: CredentialRecord) -> None:
        data = self._read_all()
        data[identity] = record.model_dump()
        self._write_all(data)
        logger.info("Stored credentials for %s in %s", identity, self._path)

    def _read_all(self) -> Dict[str, Any]:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StorageIOError(f"Unable to read {self._path}: {exc}") from exc

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageCorruptError(f"{self._path} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise StorageCorruptError(f"{self._path} does not hold a JSON object")
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        directory = self._path.parent
        tmp_name: Optional[str] = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=directory, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageIOError(f"Unable to write {self._path}: {exc}") from exc


def create_json_credential_store(*, path: Path) -> CredentialStorePort:
    """Create a file-backed credential store without FastAPI dependencies."""
    return JsonCredentialStore(path)
