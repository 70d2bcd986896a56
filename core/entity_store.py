"""In-memory collection manager for one record kind.

The store owns id assignment and CRUD semantics. Records keep insertion
order; display order is derived by `core.query_view`.
"""
from __future__ import annotations

import logging
from operator import attrgetter
from typing import Any, Callable, Generic, Iterable, Iterator, List, Mapping, Tuple, TypeVar

from core.errors import RecordNotFound

logger = logging.getLogger(__name__)

R = TypeVar("R")

# A draft is a record's field values without its id
Draft = Mapping[str, Any]


class EntityStore(Generic[R]):
    """Ordered collection of records with integer ids.

    `factory` builds a record from keyword arguments (``id`` plus the draft
    fields); a dataclass type works as-is. `id_of` reads the id back.
    """

    def __init__(
        self,
        factory: Callable[..., R],
        seed: Iterable[R] = (),
        id_of: Callable[[R], int] = attrgetter("id"),
        entity: str = "Record",
    ) -> None:
        self._factory = factory
        self._id_of = id_of
        self.entity = entity
        self._records: List[R] = list(seed)

    @property
    def records(self) -> Tuple[R, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(tuple(self._records))

    def next_id(self) -> int:
        """max(current ids, default 0) + 1. Ids of a deleted maximum are reused."""
        return max((self._id_of(r) for r in self._records), default=0) + 1

    def _index_of(self, record_id: int) -> int:
        for idx, record in enumerate(self._records):
            if self._id_of(record) == record_id:
                return idx
        raise RecordNotFound(self.entity, record_id)

    def get(self, record_id: int) -> R:
        return self._records[self._index_of(record_id)]

    def create(self, draft: Draft) -> R:
        """Append a new record built from `draft` and return it."""
        record = self._factory(id=self.next_id(), **dict(draft))
        self._records.append(record)
        logger.info("Created %s #%d", self.entity, self._id_of(record))
        return record

    def update(self, record_id: int, draft: Draft) -> R:
        """Replace the record with `record_id`, keeping its position."""
        idx = self._index_of(record_id)
        record = self._factory(id=record_id, **dict(draft))
        self._records[idx] = record
        logger.info("Updated %s #%d", self.entity, record_id)
        return record

    def delete(self, record_id: int) -> R:
        """Remove the record with `record_id` and return it."""
        idx = self._index_of(record_id)
        record = self._records.pop(idx)
        logger.info("Deleted %s #%d", self.entity, record_id)
        return record
