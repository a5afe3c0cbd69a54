from .filenames import export_filename
from .pipeline import ExportPipeline, ExportResult
from .surface import Box, ImageLoadReport, LinkRegion, Raster, RenderingSurface

__all__ = [
    "export_filename",
    "ExportPipeline",
    "ExportResult",
    "Box",
    "ImageLoadReport",
    "LinkRegion",
    "Raster",
    "RenderingSurface",
]
