# app/services/cv_documents.py
"""Turns a stored GeneratedCV into a rendered document or an exported PDF."""
import logging

from app.errors import ExportError, ValidationError
from app.export import ExportPipeline
from app.rendering.content import GeneratedCvContent
from app.rendering.renderer import ProfileCard, RenderedDocument, render_cv

logger = logging.getLogger(__name__)


def render_generated_cv(generated_cv, template_name=None) -> RenderedDocument:
    """Render with the record's own layout unless ``template_name`` overrides it."""
    if generated_cv.generation_status != "completed" or not generated_cv.generated_content:
        raise ValidationError(
            f"CV {generated_cv.id} has no generated content (status: {generated_cv.generation_status})"
        )

    content = GeneratedCvContent.from_json(generated_cv.generated_content)
    job_posting = generated_cv.job_posting
    return render_cv(
        content,
        ProfileCard.from_model(generated_cv.profile),
        template_name or generated_cv.template_name,
        include_profile_picture=bool(generated_cv.include_profile_picture),
        cv_photo_url=generated_cv.cv_specific_photo_url,
        job_title=job_posting.job_title if job_posting else None,
        company=job_posting.company if job_posting else None,
    )


def build_export_pipeline(config, notifier=None) -> ExportPipeline:
    """The production pipeline: WeasyPrint layout, PyMuPDF capture."""
    try:
        from app.export.weasy_surface import WeasyPrintSurface
    except (ImportError, OSError) as e:
        # WeasyPrint raises OSError when its native libraries are missing
        logger.error(f"❌ Rendering libraries unavailable: {e}")
        raise ExportError("library", f"Failed to load PDF libraries ({e})") from e

    surface = WeasyPrintSurface(image_timeout=config["EXPORT_IMAGE_TIMEOUT"])
    return ExportPipeline(
        surface,
        page_width_mm=config["EXPORT_PAGE_WIDTH_MM"],
        scale=config["EXPORT_SCALE"],
        settle_seconds=config["EXPORT_SETTLE_SECONDS"],
        notifier=notifier,
    )
