"""
Meeting Cost Navigator — Savings Projector
Monthly / annual savings if every occurrence were shortened by `reduction_mins`.
Gated like the cost calculator: NaN or negative input projects zero savings.
"""
import math

from meeting_engines.cost import frequency_factor, hourly_cost_total, participants_ok
from meeting_engines.numeric import to_number


def run_savings(participants, reduction_mins, frequency):
    r = to_number(reduction_mins)
    hourly = hourly_cost_total(participants)
    monthly = (hourly * r / 60) * frequency_factor(frequency)

    valid = math.isfinite(monthly * 12) and r >= 0 and participants_ok(participants)
    if not valid:
        return {'monthly': 0, 'annual': 0, 'isValid': False}

    return {
        'monthly': monthly,
        'annual': monthly * 12,
        'isValid': True,
    }
