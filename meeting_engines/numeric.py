"""
Meeting Cost Navigator — Numeric Input Coercion
Form fields keep the raw text the user typed; every computation goes through to_number().
"""
import math
import re

_NUMBER_RE = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')


def _finite(v):
    return v if math.isfinite(v) else math.nan


def to_number(raw):
    """Coerce a form value to float.

    Empty text counts as 0 (a field cleared while typing). Anything that is
    not a plain, finite decimal literal becomes NaN, which the validity checks catch.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        return _finite(float(raw))
    text = str(raw).strip()
    if not text:
        return 0.0
    if not _NUMBER_RE.match(text):
        return math.nan
    return _finite(float(text))


class NumericField:
    """A numeric input: raw text while editing, parsed number for computation."""

    def __init__(self, raw=0):
        self.raw = raw

    @property
    def value(self):
        return to_number(self.raw)

    def set(self, raw):
        self.raw = raw

    def __repr__(self):
        return f"NumericField({self.raw!r})"
