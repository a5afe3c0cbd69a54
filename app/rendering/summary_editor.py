import logging

from app.services.notifications import LoggingNotifier

logger = logging.getLogger(__name__)


class EditInProgressError(RuntimeError):
    """A save is still in flight; no second edit may start."""


class SummaryEditor:
    """
    In-place editing of a generated CV's professional summary.

    ``displayed`` only changes after ``save`` returns. If ``save`` raises,
    the previous text stays displayed, ``error`` holds the cause and the
    editor remains in edit mode so the user can retry.
    """

    def __init__(self, summary, save, notifier=None):
        self.displayed = summary or ""
        self.draft = self.displayed
        self.editing = False
        self.saving = False
        self.error = None
        self._save = save
        self.notifier = notifier or LoggingNotifier()

    def begin_edit(self):
        if self.saving:
            raise EditInProgressError("A summary update is already in progress")
        self.editing = True
        self.draft = self.displayed
        self.error = None

    def cancel(self):
        if self.saving:
            raise EditInProgressError("A summary update is already in progress")
        self.editing = False
        self.draft = self.displayed

    def confirm(self, text=None) -> bool:
        if self.saving:
            raise EditInProgressError("A summary update is already in progress")
        if not self.editing:
            self.begin_edit()
        if text is not None:
            self.draft = text

        self.saving = True
        self.notifier.notify("info", "Updating summary...")
        try:
            self._save(self.draft)
        except Exception as e:
            logger.error(f"❌ Failed to update summary: {e}")
            self.error = str(e) or type(e).__name__
            self.notifier.notify("error", f"Failed to update summary: {self.error}")
            return False
        finally:
            self.saving = False

        self.displayed = self.draft
        self.editing = False
        self.error = None
        self.notifier.notify("success", "Summary updated")
        return True
