from collections.abc import Iterable, Iterator

from pdfprotect.processor.models import FileRecord


class WorkingSet:
    """The reviewer's current list of files, in the order they were added."""

    def __init__(self, records: Iterable[FileRecord] = ()) -> None:
        self._records: list[FileRecord] = list(records)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> FileRecord:
        return self._records[index]

    def extend(self, records: Iterable[FileRecord]) -> None:
        self._records.extend(records)

    def remove(self, index: int) -> FileRecord:
        return self._records.pop(index)

    def set_password(self, index: int, password: str) -> None:
        self._records[index].set_password(password)

    @property
    def ready_count(self) -> int:
        return sum(1 for record in self._records if record.is_ready)

    @property
    def pending(self) -> list[FileRecord]:
        return [record for record in self._records if not record.is_ready]

    @property
    def all_ready(self) -> bool:
        return self.ready_count == len(self._records)

    def summary(self) -> str:
        return f"{self.ready_count} of {len(self._records)} ready"
