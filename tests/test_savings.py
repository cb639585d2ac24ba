import pytest

from meeting_engines.savings import run_savings


def _p(rate, count, pid='x'):
    return {'id': pid, 'role': 'Member', 'hourlyRate': rate, 'count': count}


def test_weekly_fifteen_minutes():
    r = run_savings([_p(9000, 1, 'a'), _p(4000, 3, 'b')], 15, 'WEEKLY')
    assert r['isValid']
    assert r['monthly'] == pytest.approx(21000 * 15 / 60 * 4.33)
    assert r['annual'] == pytest.approx(r['monthly'] * 12)


def test_text_reduction_is_coerced():
    assert run_savings([_p(6000, 1)], '10', 'DAILY')['monthly'] == pytest.approx(20000)


def test_empty_reduction_means_no_savings():
    r = run_savings([_p(6000, 1)], '', 'DAILY')
    assert r['isValid']
    assert r['monthly'] == 0


@pytest.mark.parametrize('reduction', [-5, 'abc', '1e999'])
def test_negative_or_garbage_reduction_is_gated(reduction):
    r = run_savings([_p(6000, 1)], reduction, 'WEEKLY')
    assert r == {'monthly': 0, 'annual': 0, 'isValid': False}


def test_negative_rate_is_gated():
    assert not run_savings([_p(-6000, 1)], 10, 'WEEKLY')['isValid']
