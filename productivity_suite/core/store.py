"""In-memory entity stores and the workspace that owns them."""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Generic, Iterable, TypeVar

from productivity_suite.core import config
from productivity_suite.core.ids import IdGenerator, RandomIdGenerator, make_id_generator

logger = logging.getLogger(__name__)

T = TypeVar("T")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityStore(Generic[T]):
    """
    Records keyed by id.

    Iteration order is insertion order unless reorder() changes it.
    Records are mutated in place by the domain tools; there is no delete.
    """

    def __init__(self, name: str):
        self.name = name
        self._records: dict[str, T] = {}

    def add(self, record: T) -> T:
        self._records[record.id] = record
        logger.debug("%s: added %s (total=%d)", self.name, record.id, len(self._records))
        return record

    def get(self, record_id: str) -> T | None:
        return self._records.get(record_id)

    def values(self) -> list[T]:
        """Snapshot of all records in store order."""
        return list(self._records.values())

    def reorder(self, ids: Iterable[str]) -> None:
        """Rebuild iteration order. ids must be a permutation of the stored ids."""
        ids = list(ids)
        if sorted(ids) != sorted(self._records):
            raise ValueError(f"{self.name}: reorder ids do not match stored records")
        self._records = {i: self._records[i] for i in ids}

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __len__(self) -> int:
        return len(self._records)


@dataclass
class Workspace:
    """
    All state for one server instance.

    Constructed at startup and handed to every tool call. Tests build a fresh one
    with a CounterIdGenerator and a fixed clock.
    """
    new_id: IdGenerator = field(default_factory=RandomIdGenerator)
    clock: Callable[[], datetime] = utcnow
    tasks: EntityStore = field(default_factory=lambda: EntityStore("tasks"))
    notes: EntityStore = field(default_factory=lambda: EntityStore("notes"))
    meetings: EntityStore = field(default_factory=lambda: EntityStore("meetings"))
    emails: EntityStore = field(default_factory=lambda: EntityStore("emails"))

    @classmethod
    def from_config(cls) -> "Workspace":
        """Workspace with the id strategy from the environment."""
        return cls(new_id=make_id_generator(config.ID_STRATEGY, config.ID_LENGTH))
