from collections.abc import Callable, Sequence
from pathlib import Path

from pdfprotect.config.settings import Settings
from pdfprotect.extraction.extractor import DobExtractor
from pdfprotect.extraction.matcher import DobMatcher
from pdfprotect.logging.logger import Log
from pdfprotect.pdf.factory import PageRendererFactory, PdfExtractorFactory
from pdfprotect.processor.file_loader import FileLoader
from pdfprotect.processor.models import FileRecord
from pdfprotect.processor.pipeline import PipelineContext, PipelineStep
from pdfprotect.processor.steps import (
    ExtractFragmentsStep,
    LoadFileStep,
    MatchDobStep,
    RenderScreenshotStep,
)

ProgressCallback = Callable[[int, int, str], None]


class Processor:
    """Turns input PDFs into FileRecords, one file at a time.

    Pipeline per file: load -> extract fragments -> match DOB -> render screenshot.
    Any exception raised by a step is recorded on that file's record; the
    batch always continues with the next file.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, file_path: Path) -> FileRecord:
        Log.info(f"Processing {file_path}")
        context = PipelineContext(file_path=file_path)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.error(f"Failed to process {file_path.name}: {exc}")
            return FileRecord.failed(file_path, str(exc))

        if context.extraction is None:
            return FileRecord.not_found(file_path, context.raw_bytes, context.screenshot)
        return FileRecord.matched(
            file_path, context.raw_bytes, context.extraction, context.screenshot
        )

    def process_batch(
        self,
        file_paths: Sequence[Path],
        on_progress: ProgressCallback | None = None,
    ) -> list[FileRecord]:
        """Process files strictly in input order."""
        records: list[FileRecord] = []
        total = len(file_paths)
        for index, file_path in enumerate(file_paths, start=1):
            if on_progress is not None:
                on_progress(index, total, file_path.name)
            records.append(self.process(file_path))
        found = sum(1 for record in records if record.error is None)
        Log.info(f"Processed {total} files, DOB found in {found}")
        return records


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    dob_extractor = DobExtractor(DobMatcher(context_chars=settings.context_chars))
    steps: list[PipelineStep] = [
        LoadFileStep(FileLoader()),
        ExtractFragmentsStep(PdfExtractorFactory.create(settings)),
        MatchDobStep(dob_extractor),
        RenderScreenshotStep(PageRendererFactory.create(settings)),
    ]
    return Processor(steps)
