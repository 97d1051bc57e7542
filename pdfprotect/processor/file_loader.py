from pathlib import Path

from pdfprotect.processor.exceptions import FileReadError


class FileLoader:
    """Reads input PDF bytes from disk."""

    def load(self, file_path: Path) -> bytes:
        """Read file bytes.

        Raises:
            FileNotFoundError: if the file does not exist.
            FileReadError: if the path exists but cannot be read.
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        try:
            return file_path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {file_path}: {exc}") from exc


def collect_pdf_paths(paths: list[Path]) -> list[Path]:
    """Expand directories to their PDF files (sorted) and keep file paths as given."""
    collected: list[Path] = []
    for path in paths:
        if path.is_dir():
            collected.extend(
                sorted(p for p in path.iterdir() if p.is_file() and p.suffix.lower() == ".pdf")
            )
        else:
            collected.append(path)
    return collected
