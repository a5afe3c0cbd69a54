"""In-memory stand-ins for the rendering surface, PDF writer and AI writer."""

from app.errors import ExternalServiceError
from app.export import Box, ImageLoadReport, LinkRegion, Raster, RenderingSurface
from app.services.cv_writer import CvWriter

A4_BOX = Box(width=794, height=1123)


class FakeCopy:
    def __init__(self, document, width_mm):
        self.document = document
        self.width_mm = width_mm


class FakeSurface(RenderingSurface):
    """Records every call; ``fail_at`` names the call that raises."""

    def __init__(self, pages=1, fail_at=None, failed_images=0, raster_offset=0, links=None):
        self.pages = pages
        self.fail_at = fail_at
        self.failed_images = failed_images
        self.raster_offset = raster_offset
        self.links = links if links is not None else [
            LinkRegion(page=0, href="https://www.linkedin.com/in/jane", x=10, y=20, width=100, height=12),
        ]
        self.calls = []
        self.attached = []
        self.settled_for = None

    def _step(self, name):
        self.calls.append(name)
        if self.fail_at == name:
            raise RuntimeError(f"{name} broke")

    def attach_offscreen(self, document, width_mm):
        self._step("attach")
        copy = FakeCopy(document, width_mm)
        self.attached.append(copy)
        return copy

    def wait_for_images(self, copy):
        self._step("images")
        return ImageLoadReport(loaded=2, failed=self.failed_images)

    def settle(self, seconds):
        self._step("settle")
        self.settled_for = seconds

    def measure(self, copy):
        self._step("measure")
        return [A4_BOX] * self.pages

    def rasterize(self, copy, scale):
        self._step("rasterize")
        return [
            Raster(
                page=index,
                width=A4_BOX.width * scale + self.raster_offset,
                height=A4_BOX.height * scale,
                png=b"png",
            )
            for index in range(self.pages)
        ]

    def link_regions(self, copy):
        self._step("links")
        return list(self.links)

    def detach(self, copy):
        self.calls.append("detach")
        self.attached.remove(copy)


class FakePdfWriter:
    def __init__(self):
        self.written = None

    def write(self, rasters, links, scale):
        self.written = (rasters, links, scale)
        return b"%PDF-fake"


class RecordingWriter(CvWriter):
    """Tailors by rewriting the summary; can be told to fail."""

    model_name = "fake-model"

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def tailor(self, content, job_posting, *, tone=None, language=None):
        self.calls.append({"job_posting_id": job_posting.id, "tone": tone, "language": language})
        if self.fail:
            raise ExternalServiceError("model unavailable")
        return content.with_summary(f"Tailored for {job_posting.job_title}")
