import pytest

from meeting_engines.quality import UNSET_ADVICE, run_quality
from meeting_engines.tables import PURPOSES, RESULTS, SCORE_LOGIC


@pytest.mark.parametrize('purpose,result,score', [
    ('DECISION', 'DECIDED', 100),
    ('DECISION', 'DERAILED', 5),
    ('SHARE', 'SHARED_ONLY', 40),
    ('BRAINSTORM', 'ACTION_SET', 95),
    ('ONE_ON_ONE', 'DERAILED', 30),
])
def test_known_scores(purpose, result, score):
    assert run_quality(purpose, result)['score'] == score


def test_table_is_total():
    for p in PURPOSES:
        for r in RESULTS:
            q = run_quality(p, r)
            assert 0 <= q['score'] <= 100
            assert q['advice'] and q['advice'] != UNSET_ADVICE


def test_unset_selection_falls_back():
    assert run_quality(None, 'DECIDED') == {'score': 0, 'advice': UNSET_ADVICE}
    assert run_quality('SHARE', None)['score'] == 0


def test_result_is_a_copy():
    q = run_quality('SHARE', 'DECIDED')
    q['score'] = -1
    assert SCORE_LOGIC['SHARE']['DECIDED']['score'] == 70
