import pytest

from meeting_engines.cost import run_cost
from meeting_engines.tables import FREQUENCY_FACTORS


def _p(rate, count, pid='x'):
    return {'id': pid, 'role': 'Member', 'hourlyRate': rate, 'count': count}


def test_weekly_example():
    r = run_cost([_p(9000, 1, 'a'), _p(4000, 3, 'b')], 60, 'WEEKLY')
    assert r['isValid']
    assert r['hourlyCostTotal'] == 21000
    assert r['oneTimeCost'] == pytest.approx(21000)
    assert r['monthlyCost'] == pytest.approx(90930)
    assert r['annualCost'] == pytest.approx(1091160)
    assert r['totalParticipants'] == 4


@pytest.mark.parametrize('frequency', list(FREQUENCY_FACTORS))
def test_formulas_per_frequency(frequency):
    participants = [_p(7000, 2, 'a'), _p(12000, 1, 'b')]
    r = run_cost(participants, 45, frequency)
    one_time = 26000 * 45 / 60
    assert r['oneTimeCost'] == one_time
    assert r['monthlyCost'] == one_time * FREQUENCY_FACTORS[frequency]
    assert r['annualCost'] == one_time * FREQUENCY_FACTORS[frequency] * 12


def test_text_duration_is_coerced():
    assert run_cost([_p(6000, 1)], '30', 'ONCE')['oneTimeCost'] == 3000


@pytest.mark.parametrize('duration', [0, -15, '', 'abc', '1e', '1e999', float('inf')])
def test_non_positive_or_garbage_duration_is_invalid(duration):
    r = run_cost([_p(6000, 1)], duration, 'DAILY')
    assert not r['isValid']
    assert (r['oneTimeCost'], r['monthlyCost'], r['annualCost']) == (0, 0, 0)


def test_negative_rate_or_count_is_invalid():
    assert not run_cost([_p(-1, 1)], 60, 'ONCE')['isValid']
    assert not run_cost([_p(1000, -2)], 60, 'ONCE')['isValid']


def test_nan_rate_is_invalid_not_propagated():
    r = run_cost([_p('n/a', 1)], 60, 'ONCE')
    assert not r['isValid']
    assert r['oneTimeCost'] == 0


def test_zero_headcount_is_valid_and_free():
    r = run_cost([_p(5000, 0)], 60, 'MONTHLY')
    assert r['isValid']
    assert r['annualCost'] == 0


def test_unknown_frequency_raises():
    with pytest.raises(ValueError):
        run_cost([_p(1000, 1)], 60, 'HOURLY')
