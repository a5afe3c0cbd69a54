import os

import click
from flask import current_app
from flask.cli import with_appcontext

from app.databases import get_or_404
from app.models import GeneratedCV
from app.rendering.summary_editor import SummaryEditor
from app.services.cv_assembler import update_summary
from app.services.cv_documents import render_generated_cv
from app.services.notifications import LoggingNotifier


@click.group("cv")
def cv_cli():
    """Work with generated CVs from the command line."""


@cv_cli.command("export")
@click.argument("cv_id")
@click.option("--template", "template_name", default=None, help="Layout override (professional, creative, executive, minimal).")
@click.option("--output-dir", default=".", type=click.Path(file_okay=False), show_default=True)
@with_appcontext
def export_cv(cv_id, template_name, output_dir):
    """Export a generated CV to PDF."""
    generated_cv = get_or_404(GeneratedCV, cv_id, "Generated CV")
    document = render_generated_cv(generated_cv, template_name)

    factory = current_app.extensions["export_pipeline_factory"]
    result = factory(current_app.config, notifier=LoggingNotifier()).export(document)

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, result.filename)
    with open(path, "wb") as f:
        f.write(result.pdf)
    click.echo(f"✅ Wrote {path} ({result.page_count} page(s), {result.link_count} link(s))")


@cv_cli.command("edit-summary")
@click.argument("cv_id")
@click.argument("summary")
@with_appcontext
def edit_summary(cv_id, summary):
    """Replace the professional summary of a generated CV."""
    generated_cv = get_or_404(GeneratedCV, cv_id, "Generated CV")
    current = (generated_cv.generated_content or {}).get("professionalSummary", "")

    notifier = LoggingNotifier()
    editor = SummaryEditor(current, lambda text: update_summary(generated_cv, text), notifier=notifier)
    editor.begin_edit()
    if not editor.confirm(summary):
        raise click.ClickException(editor.error)
    click.echo(f"✅ Summary updated for CV {cv_id}")
