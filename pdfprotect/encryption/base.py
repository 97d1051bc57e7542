from abc import ABC, abstractmethod
from pathlib import Path


def output_path_for(file_path: Path, output_dir: Path, suffix: str = "_protected") -> Path:
    """``<output_dir>/<stem><suffix>.pdf``"""
    return output_dir / f"{file_path.stem}{suffix}.pdf"


class BasePdfEncryptor(ABC):
    """Contract for tools that write a password-protected copy of a PDF."""

    @abstractmethod
    def encrypt(self, input_path: Path, output_path: Path, password: str) -> Path:
        """Encrypt ``input_path`` with AES-256, printing allowed, changes and extraction denied.

        Returns:
            The output path.

        Raises:
            EncryptionError: if the tool fails.
        """
