from pathlib import Path
from unittest.mock import MagicMock

from pdfprotect.encryption.base import BasePdfEncryptor, output_path_for
from pdfprotect.encryption.exceptions import EncryptionError
from pdfprotect.encryption.runner import ProtectionRunner
from pdfprotect.processor.models import FileRecord
from pdfprotect.processor.working_set import WorkingSet


def _record(path: str, password: str) -> FileRecord:
    record = FileRecord.not_found(Path(path), b"%PDF", None)
    if password:
        record.set_password(password)
    return record


def _make_runner() -> tuple[ProtectionRunner, MagicMock]:
    encryptor = MagicMock(spec=BasePdfEncryptor)
    encryptor.encrypt.side_effect = lambda _src, out, _pw: out
    return ProtectionRunner(encryptor), encryptor


class TestOutputPath:
    def test_appends_suffix(self) -> None:
        assert output_path_for(Path("/in/report.pdf"), Path("/out")) == Path(
            "/out/report_protected.pdf"
        )


class TestProtectionRunner:
    def test_encrypts_into_each_files_folder_by_default(self) -> None:
        runner, encryptor = _make_runner()
        working_set = WorkingSet([_record("/in/a.pdf", "01022015"), _record("/other/b.pdf", "x")])

        summary = runner.run(working_set)

        encryptor.encrypt.assert_any_call(
            Path("/in/a.pdf"), Path("/in/a_protected.pdf"), "01022015"
        )
        encryptor.encrypt.assert_any_call(
            Path("/other/b.pdf"), Path("/other/b_protected.pdf"), "x"
        )
        assert summary.success == 2
        assert summary.total == 2
        assert summary.output_dir == Path("/in")
        assert summary.message == "All 2 PDFs have been password-protected!"
        assert working_set[0].output_path == Path("/in/a_protected.pdf")

    def test_uses_custom_output_dir(self) -> None:
        runner, encryptor = _make_runner()
        working_set = WorkingSet([_record("/in/a.pdf", "pw")])

        summary = runner.run(working_set, Path("/out"))

        encryptor.encrypt.assert_called_once_with(
            Path("/in/a.pdf"), Path("/out/a_protected.pdf"), "pw"
        )
        assert summary.output_dir == Path("/out")

    def test_skips_files_without_password(self) -> None:
        runner, encryptor = _make_runner()
        working_set = WorkingSet([_record("/in/a.pdf", ""), _record("/in/b.pdf", "pw")])

        summary = runner.run(working_set)

        encryptor.encrypt.assert_called_once()
        assert summary.success == 1
        assert summary.message == "1 of 2 PDFs protected"
        assert working_set[0].output_path is None

    def test_records_encrypt_error_and_continues(self) -> None:
        runner, encryptor = _make_runner()

        def encrypt(src: Path, out: Path, _pw: str) -> Path:
            if src.name == "a.pdf":
                raise EncryptionError("qpdf encryption failed: bad")
            return out

        encryptor.encrypt.side_effect = encrypt
        working_set = WorkingSet([_record("/in/a.pdf", "pw"), _record("/in/b.pdf", "pw")])

        summary = runner.run(working_set)

        assert working_set[0].encrypt_error == "qpdf encryption failed: bad"
        assert working_set[0].output_path is None
        assert working_set[1].output_path == Path("/in/b_protected.pdf")
        assert summary.success == 1

    def test_empty_working_set(self) -> None:
        runner, _encryptor = _make_runner()
        summary = runner.run(WorkingSet())
        assert summary.total == 0
        assert summary.output_dir is None
