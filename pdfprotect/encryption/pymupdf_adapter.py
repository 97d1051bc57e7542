from pathlib import Path

import pymupdf

from pdfprotect.encryption.base import BasePdfEncryptor
from pdfprotect.encryption.exceptions import EncryptionError


class PyMuPdfEncryptor(BasePdfEncryptor):
    """Encrypts in-process with PyMuPDF's AES-256 save option."""

    PERMISSIONS = pymupdf.PDF_PERM_PRINT | pymupdf.PDF_PERM_PRINT_HQ

    def encrypt(self, input_path: Path, output_path: Path, password: str) -> Path:
        try:
            with pymupdf.open(input_path) as doc:  # type: ignore[no-untyped-call]
                doc.save(
                    str(output_path),
                    encryption=pymupdf.PDF_ENCRYPT_AES_256,
                    owner_pw=password,
                    user_pw=password,
                    permissions=self.PERMISSIONS,
                )
        except Exception as exc:
            raise EncryptionError(f"pymupdf encryption failed: {exc}") from exc
        return output_path
