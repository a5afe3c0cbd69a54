import io
import logging
import re
import time
import uuid
from urllib.parse import urljoin

import fitz  # PyMuPDF
from PIL import Image
from weasyprint import CSS, HTML, default_url_fetcher

from .surface import Box, ImageLoadReport, LinkRegion, Raster, RenderingSurface

logger = logging.getLogger(__name__)

IMG_SRC_PATTERN = re.compile(r'<img\b[^>]*?\bsrc\s*=\s*["\']([^"\']+)["\']', re.IGNORECASE)

PX_PER_MM = 96 / 25.4
A4_RATIO = 297 / 210


class OffscreenCopy:
    def __init__(self, document, width_mm, base_url=None):
        self.id = str(uuid.uuid4())
        self.html = document.html
        self.width_mm = width_mm
        self.height_mm = width_mm * A4_RATIO
        self.base_url = base_url
        self.images = {}
        self.pdf = None


class WeasyPrintSurface(RenderingSurface):
    """
    Lays the off-screen copy out with WeasyPrint at a fixed page width
    and captures it with PyMuPDF. The copy only exists in ``_attached``
    between ``attach_offscreen`` and ``detach``.
    """

    def __init__(self, base_url=None, image_timeout=10):
        self.base_url = base_url
        self.image_timeout = image_timeout
        self._attached = {}

    @property
    def attached_count(self):
        return len(self._attached)

    def attach_offscreen(self, document, width_mm):
        copy = OffscreenCopy(document, width_mm, base_url=self.base_url)
        self._attached[copy.id] = copy
        logger.debug(f"Attached off-screen copy {copy.id} at {width_mm}mm")
        return copy

    def wait_for_images(self, copy):
        loaded = failed = 0
        for src in dict.fromkeys(IMG_SRC_PATTERN.findall(copy.html)):
            url = urljoin(copy.base_url or "", src)
            try:
                fetched = default_url_fetcher(url, timeout=self.image_timeout)
                data = fetched.get("string")
                if data is None and fetched.get("file_obj") is not None:
                    data = fetched["file_obj"].read()
                copy.images[url] = {
                    "string": data,
                    "mime_type": fetched.get("mime_type"),
                    "redirected_url": fetched.get("redirected_url", url),
                }
                loaded += 1
            except Exception as e:
                logger.warning(f"⚠️ Image failed to load ({src[:80]}): {e}")
                copy.images[url] = None
                failed += 1
        return ImageLoadReport(loaded=loaded, failed=failed)

    def settle(self, seconds):
        if seconds > 0:
            time.sleep(seconds)

    def _layout(self, copy):
        if copy.pdf is None:
            def fetch(url):
                if url in copy.images:
                    cached = copy.images[url]
                    if cached is None:
                        raise ValueError(f"Image previously failed to load: {url}")
                    return dict(cached)
                return default_url_fetcher(url, timeout=self.image_timeout)

            page_css = CSS(string=(
                f"@page {{ size: {copy.width_mm}mm {copy.height_mm}mm; margin: 0; }}"
                f" #cv-preview {{ width: {copy.width_mm}mm !important; max-width: none !important; }}"
            ))
            html = HTML(string=copy.html, base_url=copy.base_url, url_fetcher=fetch)
            pdf_bytes = html.write_pdf(stylesheets=[page_css])
            copy.pdf = fitz.open(stream=pdf_bytes, filetype="pdf")
        return copy.pdf

    def _page_box(self, copy):
        return Box(
            width=round(copy.width_mm * PX_PER_MM),
            height=round(copy.height_mm * PX_PER_MM),
        )

    def measure(self, copy):
        pdf = self._layout(copy)
        return [self._page_box(copy) for _ in range(pdf.page_count)]

    def rasterize(self, copy, scale):
        pdf = self._layout(copy)
        box = self._page_box(copy)
        target = (box.width * scale, box.height * scale)
        rasters = []
        for index, page in enumerate(pdf):
            matrix = fitz.Matrix(target[0] / page.rect.width, target[1] / page.rect.height)
            pix = page.get_pixmap(matrix=matrix, alpha=False)
            image = Image.open(io.BytesIO(pix.tobytes("png")))
            if image.size != target:
                # pixmap bounds are rounded outwards
                image = image.resize(target, Image.Resampling.LANCZOS)
            buffer = io.BytesIO()
            image.save(buffer, format="PNG")
            rasters.append(Raster(page=index, width=target[0], height=target[1], png=buffer.getvalue()))
        return rasters

    def link_regions(self, copy):
        pdf = self._layout(copy)
        box = self._page_box(copy)
        regions = []
        for index, page in enumerate(pdf):
            sx = box.width / page.rect.width
            sy = box.height / page.rect.height
            for link in page.get_links():
                if link.get("kind") != fitz.LINK_URI or not link.get("uri"):
                    continue
                rect = link["from"]
                regions.append(LinkRegion(
                    page=index,
                    href=link["uri"],
                    x=rect.x0 * sx,
                    y=rect.y0 * sy,
                    width=rect.width * sx,
                    height=rect.height * sy,
                ))
        return regions

    def detach(self, copy):
        if copy.pdf is not None:
            copy.pdf.close()
            copy.pdf = None
        copy.images.clear()
        self._attached.pop(copy.id, None)
        logger.debug(f"Detached off-screen copy {copy.id}")
