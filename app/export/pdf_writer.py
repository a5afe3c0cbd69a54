import logging

import fitz  # PyMuPDF

logger = logging.getLogger(__name__)


class PyMuPdfWriter:
    """One PDF page per raster, sized in raster pixels, with link annotations."""

    def write(self, rasters, links, scale) -> bytes:
        doc = fitz.open()
        try:
            for raster in rasters:
                page = doc.new_page(width=raster.width, height=raster.height)
                page.insert_image(page.rect, stream=raster.png)
                for link in links:
                    if link.page != raster.page:
                        continue
                    rect = fitz.Rect(
                        link.x * scale,
                        link.y * scale,
                        (link.x + link.width) * scale,
                        (link.y + link.height) * scale,
                    )
                    page.insert_link({"kind": fitz.LINK_URI, "from": rect, "uri": link.href})
            return doc.tobytes(deflate=True)
        finally:
            doc.close()
