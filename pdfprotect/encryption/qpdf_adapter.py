import subprocess
from pathlib import Path

from pdfprotect.encryption.base import BasePdfEncryptor
from pdfprotect.encryption.exceptions import EncryptionError


class QpdfEncryptor(BasePdfEncryptor):
    """Encrypts by running the qpdf command line tool."""

    def __init__(self, qpdf_path: str = "qpdf") -> None:
        self._qpdf_path = qpdf_path

    def build_args(self, input_path: Path, output_path: Path, password: str) -> list[str]:
        return [
            self._qpdf_path,
            "--encrypt", password, password, "256",
            "--modify=none",
            "--extract=n",
            "--print=full",
            "--",
            str(input_path),
            str(output_path),
        ]

    def encrypt(self, input_path: Path, output_path: Path, password: str) -> Path:
        try:
            completed = subprocess.run(
                self.build_args(input_path, output_path, password),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise EncryptionError(f"qpdf encryption failed: {exc}") from exc
        if completed.returncode != 0:
            detail = completed.stderr.strip() or f"exit status {completed.returncode}"
            raise EncryptionError(f"qpdf encryption failed: {detail}")
        return output_path
