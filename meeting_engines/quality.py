"""
Meeting Cost Navigator — Quality Scorer
Purpose x outcome lookup into SCORE_LOGIC with a fallback for unset selections.
"""
from meeting_engines.tables import SCORE_LOGIC

UNSET_ADVICE = 'Select a purpose and an outcome to rate this meeting.'


def run_quality(purpose, result):
    cell = SCORE_LOGIC.get(purpose, {}).get(result)
    if cell is None:
        return {'score': 0, 'advice': UNSET_ADVICE}
    return dict(cell)
