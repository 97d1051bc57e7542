from pdfprotect.extraction.exceptions import MalformedDateError
from pdfprotect.extraction.extractor import DobExtractor
from pdfprotect.logging.logger import Log
from pdfprotect.pdf.base import BasePageRenderer, BasePdfExtractor
from pdfprotect.pdf.exceptions import PdfRenderError
from pdfprotect.processor.file_loader import FileLoader
from pdfprotect.processor.pipeline import PipelineContext, PipelineStep


class LoadFileStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_bytes = self._file_loader.load(context.file_path)
        Log.info(f"Loaded {len(context.raw_bytes)} bytes", file=context.file_path.name)
        return context


class ExtractFragmentsStep(PipelineStep):
    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.fragments = self._pdf_extractor.extract_fragments(context.buffer_copy())
        Log.info(
            f"Extracted {len(context.fragments)} text fragments from page 1",
            file=context.file_path.name,
        )
        return context


class MatchDobStep(PipelineStep):
    def __init__(self, dob_extractor: DobExtractor) -> None:
        self._dob_extractor = dob_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.extraction = self._dob_extractor.extract(context.fragments)
        except MalformedDateError as exc:
            Log.warning(f"Discarding DOB match: {exc}", file=context.file_path.name)
            context.extraction = None
        if context.extraction is None:
            Log.warning("No DOB found on page 1", file=context.file_path.name)
        else:
            Log.info(f"Found DOB {context.extraction.dob}", file=context.file_path.name)
        return context


class RenderScreenshotStep(PipelineStep):
    """Best-effort; a rendering failure only drops the visual evidence."""

    def __init__(self, renderer: BasePageRenderer) -> None:
        self._renderer = renderer

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.screenshot = self._renderer.render_header(context.buffer_copy())
        except PdfRenderError as exc:
            Log.warning(f"Screenshot failed: {exc}", file=context.file_path.name)
            context.screenshot = None
        return context
