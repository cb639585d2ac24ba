"""
Meeting Cost Navigator — Cost Calculator
One-time / monthly / annual meeting cost from participants, duration and frequency.
"""
import math

from meeting_engines.numeric import to_number
from meeting_engines.tables import FREQUENCY_FACTORS


def hourly_cost_total(participants):
    return sum(to_number(p.get('hourlyRate')) * to_number(p.get('count')) for p in participants)


def participants_ok(participants):
    """Every rate and count is a non-negative number."""
    for p in participants:
        rate = to_number(p.get('hourlyRate'))
        count = to_number(p.get('count'))
        if math.isnan(rate) or math.isnan(count) or rate < 0 or count < 0:
            return False
    return True


def frequency_factor(frequency):
    if frequency not in FREQUENCY_FACTORS:
        raise ValueError(f"Unknown frequency '{frequency}'")
    return FREQUENCY_FACTORS[frequency]


def run_cost(participants, duration, frequency):
    d = to_number(duration)
    hourly = hourly_cost_total(participants)
    one_time = hourly * d / 60
    monthly = one_time * frequency_factor(frequency)
    annual = monthly * 12
    total_participants = sum(to_number(p.get('count')) for p in participants)

    valid = math.isfinite(annual) and d > 0 and participants_ok(participants)

    return {
        'hourlyCostTotal': hourly if valid else 0,
        'oneTimeCost': one_time if valid else 0,
        'monthlyCost': monthly if valid else 0,
        'annualCost': annual if valid else 0,
        'totalParticipants': total_participants if math.isfinite(total_participants) else 0,
        'isValid': valid,
    }
