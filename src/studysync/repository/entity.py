# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Generic, Optional, TypeVar, cast

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from studysync import time
from studysync.model.entity_id import EntityId, generate_entity_id

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class EntityRepository(Generic[RecordT]):
    """
    One YAML file per record under a data directory.

    Records are loaded lazily on first access, copied in and out so callers
    never hold a reference into the cache, and written back on flush() for
    the ids touched since the last flush.
    """

    def __init__(self, data_dir: Callable[[], Path]) -> None:
        self._data_dir = data_dir
        self._records: Optional[list[RecordT]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def data_dir(self) -> Path:
        return self._data_dir()

    @property
    def records(self) -> list[RecordT]:
        if self._records is None:
            self.__load_data()
        if self._records is None:
            raise ValueError()
        return self._records

    def __load_data(self) -> None:
        records: list[RecordT] = []
        if self.data_dir.is_dir():
            for file_path in sorted(self.data_dir.iterdir()):
                if file_path.suffix != ".yaml":
                    continue
                # A corrupt file is skipped so the other records stay usable
                try:
                    raw_record = load(file_path.read_text(), Loader=Loader)
                    if raw_record is not None:
                        records.append(self._convert_for_deserialization(raw_record))
                except (YAMLError, ValueError, TypeError, KeyError):
                    logger.exception("Skipping unreadable record file %s", file_path)
        self._records = records

    def __save_data(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for record in self.records:
            record_id = self._id_of(record)
            if record_id in self._dirty_ids:
                serializable_record = self._convert_for_serialization(
                    deepcopy(record)
                )
                file_path = self.data_dir / f"{record_id}.yaml"
                file_path.write_text(dump(serializable_record, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = self.data_dir / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        # Clear tracking sets
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._records is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def _convert_for_serialization(self, record: RecordT) -> dict[str, Any]:
        serializable_record = cast(dict[str, Any], record)
        serializable_record["created"] = time.datetime_to_iso_str(
            serializable_record["created"]
        )
        serializable_record["updated"] = time.datetime_to_iso_str(
            serializable_record["updated"]
        )
        return serializable_record

    def _convert_for_deserialization(self, record: dict[str, Any]) -> RecordT:
        record["created"] = time.datetime_from_str(record["created"])
        record["updated"] = time.datetime_from_str(record["updated"])
        return cast(RecordT, record)

    def _id_of(self, record: RecordT) -> Optional[EntityId]:
        return cast(dict[str, Any], record)["id"]

    def save(self, record: RecordT) -> RecordT:
        """
        Insert or update a record.

        A record without an id is assigned one; the id is written back onto
        the caller's record as well as the returned copy.
        """
        self.is_dirty = True

        raw_record = cast(dict[str, Any], record)
        if raw_record["id"] is None:
            raw_record["id"] = generate_entity_id()
        raw_record["updated"] = time.now_utc()

        stored = deepcopy(record)
        record_id = raw_record["id"]
        for index, existing in enumerate(self.records):
            if self._id_of(existing) == record_id:
                self.records[index] = stored
                break
        else:
            self.records.append(stored)

        self._dirty_ids.add(record_id)
        self._deleted_ids.discard(record_id)
        return deepcopy(stored)

    def find_all(self) -> list[RecordT]:
        return deepcopy(self.records)

    def find_by_id(self, id: EntityId) -> Optional[RecordT]:
        for record in self.records:
            if self._id_of(record) == id:
                return deepcopy(record)
        return None

    def get_by_id(self, id: EntityId) -> RecordT:
        record = self.find_by_id(id)
        if record is None:
            raise KeyError(id)
        return record

    def delete_by_id(self, id: EntityId) -> bool:
        for index, record in enumerate(self.records):
            if self._id_of(record) == id:
                self.is_dirty = True
                del self.records[index]
                self._dirty_ids.discard(id)
                self._deleted_ids.add(id)
                return True
        return False
