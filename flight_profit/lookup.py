"""Case-insensitive keyed lookup over reference tables."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Iterable, Iterator, List, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class NotFound:
    """Lookup miss, carrying every valid key of the table."""

    key: str
    valid_keys: List[str] = field(default_factory=list)


class ReferenceTable(Generic[T]):
    """Read-only table of records keyed by one of their attributes."""

    def __init__(self, records: Iterable[T], key_field: str):
        """
        Build the table.

        Args:
            records: Records to index
            key_field: Attribute holding each record's key

        Raises:
            ValueError: If two records share a key (ignoring case)
        """
        self.key_field = key_field
        self._records: Dict[str, T] = {}
        self._keys: List[str] = []

        for record in records:
            key = str(getattr(record, key_field))
            normalized = key.upper()
            if normalized in self._records:
                raise ValueError(f"Duplicate {key_field} in reference table: {key}")
            self._records[normalized] = record
            self._keys.append(key)

        logger.debug(f"Indexed {len(self._keys)} records by {key_field}")

    def resolve(self, key: str) -> Union[T, NotFound]:
        """Find the record whose key equals ``key`` ignoring case."""
        record = self._records.get(str(key).strip().upper())
        if record is None:
            return NotFound(key=key, valid_keys=list(self._keys))
        return record

    def keys(self) -> List[str]:
        """Keys in the order the records were supplied."""
        return list(self._keys)

    def __contains__(self, key: object) -> bool:
        return str(key).strip().upper() in self._records

    def __iter__(self) -> Iterator[T]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)


def resolve(key: str, table: ReferenceTable[T]) -> Union[T, NotFound]:
    """Resolve ``key`` against ``table``; see ReferenceTable.resolve."""
    return table.resolve(key)
