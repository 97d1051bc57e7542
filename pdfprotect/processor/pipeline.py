from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from pdfprotect.extraction.models import ExtractionResult
from pdfprotect.pdf.models import TextFragment


@dataclass(slots=True)
class PipelineContext:
    file_path: Path
    raw_bytes: bytes = b""
    fragments: list[TextFragment] = field(default_factory=list)
    extraction: ExtractionResult | None = None
    screenshot: str | None = None

    def buffer_copy(self) -> bytearray:
        """Independent copy of the raw bytes for one PDF engine call."""
        return bytearray(self.raw_bytes)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
