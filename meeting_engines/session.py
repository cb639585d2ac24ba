"""
Meeting Cost Navigator — Session
One user's form, derived figures, history and feedback, recomputed on every read.
"""
from meeting_engines.cost import run_cost
from meeting_engines.feedback import BufferClipboard, Feedback, copy_to_clipboard
from meeting_engines.form import FormState
from meeting_engines.history import HISTORY_KEY, HISTORY_LIMIT, HistoryStore, make_history_item
from meeting_engines.quality import run_quality
from meeting_engines.report import TEMPLATE_KINDS, build_summary, build_template
from meeting_engines.savings import run_savings


class MeetingSession:

    def __init__(self, storage, presets=None, clipboard=None, feedback=None,
                 history_key=HISTORY_KEY, history_limit=HISTORY_LIMIT):
        self.form = FormState(presets)
        self.history = HistoryStore(storage, key=history_key, limit=history_limit)
        self.clipboard = clipboard or BufferClipboard()
        self.feedback = feedback or Feedback()
        self.history.load()

    @property
    def presets(self):
        return self.form.presets

    def derive(self):
        f = self.form
        return {
            'cost': run_cost(f.participants, f.duration.raw, f.frequency),
            'quality': run_quality(f.purpose, f.result),
            'savings': run_savings(f.participants, f.reduction_mins.raw, f.frequency),
        }

    def save_to_history(self, timestamp=None):
        """Validate, snapshot and prepend. Returns the new item, or None if validation failed."""
        if not self.form.validate():
            return None
        d = self.derive()
        item = make_history_item(self.form.snapshot(), d['cost'], d['quality'], timestamp)
        self.history.save(item)
        self.feedback.show('Saved to history')
        return item

    def restore_history(self, item_id):
        item = self.history.get(item_id)
        self.form.restore(item)
        return item

    def clear_all(self, confirm):
        """Wipe history and reset the form, only if confirm() agrees."""
        if not confirm():
            return False
        self.history.clear()
        self.form.reset()
        return True

    def copy(self, kind, today=None):
        snapshot = self.form.snapshot()
        d = self.derive()
        if kind == 'summary':
            text = build_summary(snapshot, d['cost'], d['quality'])
            message = 'Summary copied to clipboard'
        elif kind in TEMPLATE_KINDS:
            text = build_template(kind, snapshot, d['cost'], today)
            message = 'Template copied'
        else:
            raise ValueError(f"Unknown copy target '{kind}'")
        ok = copy_to_clipboard(self.clipboard, text)
        if ok:
            self.feedback.show(message)
        return text, ok
