import logging
from typing import Iterable

logger = logging.getLogger("pagetable.dataset_store")

Record = tuple[str, ...]


class InvalidArgument(ValueError):
    """Raised when a caller passes an argument the engine cannot normalize."""


def to_record(row: Iterable) -> Record:
    return tuple("" if field is None else str(field) for field in row)


class DatasetStore:
    """Ordered collection of records with page-aware mutation helpers.

    The store only tracks rows; page counts and windows are derived by the
    owning engine after each mutation.
    """

    def __init__(self, rows: Iterable[Iterable] = ()):
        self._records: list[Record] = [to_record(r) for r in rows]

    def __len__(self) -> int:
        return len(self._records)

    @property
    def total(self) -> int:
        return len(self._records)

    @property
    def records(self) -> list[Record]:
        return list(self._records)

    # ----- mutations -----
    def append(self, rows: Iterable[Iterable]) -> int:
        new = [to_record(r) for r in rows]
        self._records.extend(new)
        logger.debug("Appended %d rows (total %d)", len(new), len(self._records))
        return len(new)

    def modify(self, rows: Iterable[Iterable], start_index: int) -> int:
        if start_index < 0:
            raise InvalidArgument(
                f"Modify requires a non-negative start index, got {start_index}"
            )
        new = [to_record(r) for r in rows]
        appended = 0
        for offset, record in enumerate(new):
            idx = start_index + offset
            if idx < len(self._records):
                self._records[idx] = record
            else:
                self._records.append(record)
                appended += 1
        logger.debug(
            "Modified %d rows from index %d (%d appended past end)",
            len(new) - appended,
            start_index,
            appended,
        )
        return len(new)

    def delete(self, rows: Iterable[Iterable]) -> int:
        before = len(self._records)
        for target in [to_record(r) for r in rows]:
            self._records = [r for r in self._records if r != target]
        removed = before - len(self._records)
        logger.debug("Deleted %d rows (total %d)", removed, len(self._records))
        return removed

    # ----- reads -----
    def page_slice(self, current_page: int, page_size: int) -> list[Record]:
        start = (current_page - 1) * page_size
        if start < 0 or start >= len(self._records):
            return []
        end = min(start + page_size, len(self._records))
        return self._records[start:end]

    def slice_bounds(self, current_page: int, page_size: int) -> tuple[int, int]:
        start = max(0, (current_page - 1) * page_size)
        end = min(len(self._records), start + page_size)
        return start, max(start, end)
