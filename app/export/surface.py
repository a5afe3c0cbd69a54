"""The rendering-surface capability the export pipeline drives.

A surface owns the off-screen copy of a rendered CV: it lays the copy
out at a fixed physical width, waits for its images, measures it,
rasterizes it and reports where its hyperlinks ended up. Geometry is in
CSS pixels relative to the captured element's top-left corner.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    width: int
    height: int


@dataclass(frozen=True)
class Raster:
    page: int
    width: int
    height: int
    png: bytes


@dataclass(frozen=True)
class LinkRegion:
    page: int
    href: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ImageLoadReport:
    loaded: int = 0
    failed: int = 0

    @property
    def total(self):
        return self.loaded + self.failed


class RenderingSurface:
    def attach_offscreen(self, document, width_mm):
        """Create an off-screen copy of ``document`` forced to ``width_mm``."""
        raise NotImplementedError

    def wait_for_images(self, copy) -> ImageLoadReport:
        """Block until every image in the copy has loaded or failed."""
        raise NotImplementedError

    def settle(self, seconds):
        raise NotImplementedError

    def measure(self, copy) -> list:
        """One ``Box`` per captured page."""
        raise NotImplementedError

    def rasterize(self, copy, scale) -> list:
        """One ``Raster`` per page, ``scale`` times the measured box."""
        raise NotImplementedError

    def link_regions(self, copy) -> list:
        raise NotImplementedError

    def detach(self, copy):
        """Remove the off-screen copy and release whatever it holds."""
        raise NotImplementedError
