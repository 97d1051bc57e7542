from dataclasses import dataclass
from pathlib import Path

from pdfprotect.encryption.base import BasePdfEncryptor, output_path_for
from pdfprotect.logging.logger import Log
from pdfprotect.processor.models import FileRecord
from pdfprotect.processor.working_set import WorkingSet


@dataclass(frozen=True)
class ProtectionSummary:
    success: int
    total: int
    output_dir: Path | None

    @property
    def message(self) -> str:
        if self.success == self.total:
            return f"All {self.total} PDFs have been password-protected!"
        return f"{self.success} of {self.total} PDFs protected"


class ProtectionRunner:
    """Encrypt every ready file in a working set, recording per-file outcomes."""

    def __init__(self, encryptor: BasePdfEncryptor, output_suffix: str = "_protected") -> None:
        self._encryptor = encryptor
        self._output_suffix = output_suffix

    def run(self, working_set: WorkingSet, output_dir: Path | None = None) -> ProtectionSummary:
        """Files without a password are skipped; an unset output_dir means each file's own folder."""
        success = 0
        for record in working_set:
            if not record.password:
                continue
            if self._protect(record, output_dir or record.file_path.parent):
                success += 1

        summary_dir = output_dir
        if summary_dir is None and len(working_set) > 0:
            summary_dir = working_set[0].file_path.parent
        summary = ProtectionSummary(success=success, total=len(working_set), output_dir=summary_dir)
        Log.info(summary.message)
        return summary

    def _protect(self, record: FileRecord, target_dir: Path) -> bool:
        output_path = output_path_for(record.file_path, target_dir, self._output_suffix)
        try:
            record.output_path = self._encryptor.encrypt(
                record.file_path, output_path, record.password
            )
        except Exception as exc:
            record.encrypt_error = str(exc)
            Log.error(f"Encryption failed for {record.file_name}: {exc}")
            return False
        record.encrypt_error = None
        Log.info(f"Protected {record.file_name}", output=record.output_path)
        return True
