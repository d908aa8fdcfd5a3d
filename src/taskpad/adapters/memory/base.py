"""Shared machinery for the in-memory entity stores."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import AsyncIterator, Callable, Iterable, Mapping
from typing import Any, Generic, Protocol, TypeVar

import pydantic

from taskpad.models import NotFoundError, ValidationError
from taskpad.utils.clock import Clock, system_now

logger = logging.getLogger(__name__)


class _Record(Protocol):
    id: int


RecordT = TypeVar("RecordT", bound=_Record)
ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)

CommitHook = Callable[[list[Any], int], None]


def describe_validation_error(exc: pydantic.ValidationError) -> str:
    """Flatten a pydantic error into a single human readable line."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error["loc"])
        msg = error["msg"].removeprefix("Value error, ")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def validate_input(model: type[ModelT], data: ModelT | Mapping[str, Any]) -> ModelT:
    """Coerce caller input into a typed model, raising taskpad's ValidationError."""
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(dict(data))
    except pydantic.ValidationError as e:
        raise ValidationError(describe_validation_error(e)) from e
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Expected a mapping of fields, got {type(data).__name__}") from e


def build_record(model: type[ModelT], fields: Mapping[str, Any]) -> ModelT:
    """Validate a complete record before it is committed."""
    try:
        return model.model_validate(dict(fields))
    except pydantic.ValidationError as e:
        raise ValidationError(describe_validation_error(e)) from e


class InMemoryStore(Generic[RecordT]):
    """Id-keyed record collection with monotonic id allocation.

    Records are immutable models; every mutation builds a new mapping and
    commits it in one step, so a failed operation leaves the store untouched.
    An optional ``on_commit`` hook receives the new records and next id before
    they become visible; if it raises, the mutation is discarded.

    Calls are serialised through an asyncio lock. With a non-zero ``latency``
    each call sleeps while holding the lock, so concurrently scheduled calls
    still apply in the order they were issued.
    """

    entity = "Record"

    def __init__(
        self,
        records: Iterable[RecordT] = (),
        *,
        next_id: int | None = None,
        latency: float = 0.0,
        clock: Clock | None = None,
        on_commit: CommitHook | None = None,
    ):
        self._initial = list(records)
        self._initial_next_id = next_id
        self._latency = latency
        self._clock = clock or system_now
        self._on_commit = on_commit
        self._lock = asyncio.Lock()
        self._records: dict[int, RecordT] = {}
        self._next_id = 1
        self._load(self._initial, next_id)

    def _load(self, records: list[RecordT], next_id: int | None) -> None:
        self._records = {record.id: record for record in records}
        highest = max(self._records, default=0)
        self._next_id = max(highest + 1, next_id or 1)

    @property
    def next_id(self) -> int:
        return self._next_id

    def snapshot(self) -> list[RecordT]:
        """Return the current records in insertion order."""
        return list(self._records.values())

    def reset(self) -> None:
        """Restore the records and id counter the store was constructed with."""
        self._commit(
            {record.id: record for record in self._initial},
            max(max((r.id for r in self._initial), default=0) + 1, self._initial_next_id or 1),
        )
        logger.debug("%s store reset (%d records)", self.entity, len(self._records))

    @contextlib.asynccontextmanager
    async def _operation(self) -> AsyncIterator[None]:
        async with self._lock:
            if self._latency > 0:
                await asyncio.sleep(self._latency)
            yield

    def _require(self, record_id: int) -> RecordT:
        record = self._records.get(record_id)
        if record is None:
            raise NotFoundError(self.entity, record_id)
        return record

    def _commit(self, records: dict[int, RecordT], next_id: int | None = None) -> None:
        next_id = self._next_id if next_id is None else next_id
        if self._on_commit is not None:
            self._on_commit(list(records.values()), next_id)
        self._records = records
        self._next_id = next_id

    def _put(self, record: RecordT, *, allocated: bool = False) -> None:
        records = dict(self._records)
        records[record.id] = record
        self._commit(records, record.id + 1 if allocated else None)

    def _remove(self, record_id: int) -> None:
        self._require(record_id)
        records = dict(self._records)
        del records[record_id]
        self._commit(records)
