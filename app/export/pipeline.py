import logging
from dataclasses import dataclass

from app.errors import ExportError
from app.services.notifications import LoggingNotifier
from .filenames import export_filename

logger = logging.getLogger(__name__)

A4_WIDTH_MM = 210
DEFAULT_SCALE = 3
DEFAULT_SETTLE_SECONDS = 0.5


def load_pdf_writer():
    from app.export.pdf_writer import PyMuPdfWriter
    return PyMuPdfWriter()


@dataclass(frozen=True)
class ExportResult:
    filename: str
    pdf: bytes
    page_count: int
    link_count: int
    images_failed: int = 0


class ExportPipeline:
    """
    Turns a rendered CV into a raster-in-PDF with clickable link regions.

    The live document is never captured directly. An off-screen copy is
    laid out at a fixed page width, its images are awaited, layout is
    given a settle delay, then it is rasterized at ``scale`` and every
    link rectangle is re-created from the copy's geometry. The copy is
    detached on every path, success or failure.
    """

    def __init__(
        self,
        surface,
        *,
        page_width_mm=A4_WIDTH_MM,
        scale=DEFAULT_SCALE,
        settle_seconds=DEFAULT_SETTLE_SECONDS,
        notifier=None,
        writer_factory=load_pdf_writer,
    ):
        self.surface = surface
        self.page_width_mm = page_width_mm
        self.scale = scale
        self.settle_seconds = settle_seconds
        self.notifier = notifier or LoggingNotifier()
        self.writer_factory = writer_factory

    def export(self, document) -> ExportResult:
        self.notifier.notify("info", "Preparing PDF...")
        stage = "library"
        copy = None
        try:
            try:
                writer = self.writer_factory()
            except ImportError as e:
                raise ExportError(stage, f"Failed to load PDF libraries ({e})") from e

            stage = "source"
            if document is None or not (document.html or "").strip():
                raise ExportError(stage, "Preview content not found")

            stage = "attach"
            copy = self.surface.attach_offscreen(document, self.page_width_mm)

            stage = "images"
            report = self.surface.wait_for_images(copy)
            logger.info(f"🖼️ {report.loaded}/{report.total} image(s) loaded")
            if report.failed:
                self.notifier.notify("warning", f"{report.failed} image(s) could not be loaded")

            stage = "settle"
            self.surface.settle(self.settle_seconds)

            stage = "measure"
            boxes = self.surface.measure(copy)
            if not boxes:
                raise ExportError(stage, "Rendered document has no pages")

            stage = "rasterize"
            rasters = self.surface.rasterize(copy, self.scale)
            self._check_raster_sizes(boxes, rasters)

            stage = "links"
            links = self.surface.link_regions(copy)

            stage = "assemble"
            pdf = writer.write(rasters, links, self.scale)
        except ExportError as e:
            logger.error(f"❌ Export failed at {e.stage}: {e.cause}")
            self.notifier.notify("error", e.message)
            raise
        except Exception as e:
            logger.exception(f"❌ Export failed at {stage}")
            error = ExportError(stage, str(e) or type(e).__name__)
            self.notifier.notify("error", error.message)
            raise error from e
        finally:
            if copy is not None:
                self.surface.detach(copy)

        result = ExportResult(
            filename=f"{export_filename(document.subject_name)}.pdf",
            pdf=pdf,
            page_count=len(rasters),
            link_count=len(links),
            images_failed=report.failed,
        )
        logger.info(f"✅ Exported {result.filename}: {result.page_count} page(s), {result.link_count} link(s)")
        self.notifier.notify("success", "PDF downloaded")
        return result

    def _check_raster_sizes(self, boxes, rasters):
        if len(boxes) != len(rasters):
            raise ExportError("rasterize", f"Expected {len(boxes)} page(s), rasterized {len(rasters)}")
        for box, raster in zip(boxes, rasters):
            expected = (box.width * self.scale, box.height * self.scale)
            if (raster.width, raster.height) != expected:
                raise ExportError(
                    "rasterize",
                    f"Page {raster.page} rasterized at {raster.width}x{raster.height}, "
                    f"expected {expected[0]}x{expected[1]}",
                )
