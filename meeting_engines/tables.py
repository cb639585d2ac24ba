"""
Meeting Cost Navigator — Domain Tables
Role-rate presets, frequency factors and the purpose x outcome quality matrix.
"""

# ── Frequency -> monthly multiplier ──
# Empirical approximations: 20 working days, ~4.33 weeks, ~2.16 fortnights per month.
FREQUENCY_FACTORS = {
    'ONCE': 1,
    'DAILY': 20,
    'WEEKLY': 4.33,
    'BIWEEKLY': 2.16,
    'MONTHLY': 1,
}

FREQUENCY_LABELS = {
    'ONCE': 'One-off',
    'DAILY': 'Daily (20 working days)',
    'WEEKLY': 'Weekly',
    'BIWEEKLY': 'Every two weeks',
    'MONTHLY': 'Monthly',
}

PURPOSES = ('SHARE', 'CONSENSUS', 'DECISION', 'BRAINSTORM', 'ONE_ON_ONE')
RESULTS = ('DECIDED', 'ACTION_SET', 'SHARED_ONLY', 'DERAILED')

PURPOSE_LABELS = {
    'SHARE': 'Information sharing',
    'CONSENSUS': 'Consensus building',
    'DECISION': 'Decision making',
    'BRAINSTORM': 'Brainstorm',
    'ONE_ON_ONE': '1on1',
}

RESULT_LABELS = {
    'DECIDED': 'Decision made',
    'ACTION_SET': 'Next actions agreed',
    'SHARED_ONLY': 'Information shared only',
    'DERAILED': 'Derailed / no conclusion',
}

DEFAULT_ROLE_PRESETS = [
    {'role': 'Executive', 'hourlyRate': 12000},
    {'role': 'Director', 'hourlyRate': 9000},
    {'role': 'Manager', 'hourlyRate': 7000},
    {'role': 'Member', 'hourlyRate': 4000},
    {'role': 'External', 'hourlyRate': 10000},
]

SCORE_LOGIC = {
    'SHARE': {
        'DECIDED': {'score': 70, 'advice': 'Shared and still reached a decision. Consider sharing asynchronously next time.'},
        'ACTION_SET': {'score': 60, 'advice': 'Actions came out of a sharing session. A written update could save the meeting time.'},
        'SHARED_ONLY': {'score': 40, 'advice': 'For pure sharing, switch to an async channel such as chat or email.'},
        'DERAILED': {'score': 10, 'advice': 'A derailed sharing meeting wastes everyone\'s time. Fix the agenda up front.'},
    },
    'CONSENSUS': {
        'DECIDED': {'score': 90, 'advice': 'Very efficient. Consensus was reached smoothly.'},
        'ACTION_SET': {'score': 80, 'advice': 'Good outcome. Naming the decision owner would speed things up further.'},
        'SHARED_ONLY': {'score': 30, 'advice': 'No consensus reached. Make sure the material is read beforehand.'},
        'DERAILED': {'score': 10, 'advice': 'The issues were unclear. Collect objections before the meeting.'},
    },
    'DECISION': {
        'DECIDED': {'score': 100, 'advice': 'A textbook meeting. Announce the decision right away.'},
        'ACTION_SET': {'score': 70, 'advice': 'Progress without a decision. Settle it next time.'},
        'SHARED_ONLY': {'score': 20, 'advice': 'A decision meeting that only shared information has failed. Preparation was likely lacking.'},
        'DERAILED': {'score': 5, 'advice': 'The worst pattern. Consider changing the facilitator.'},
    },
    'BRAINSTORM': {
        'DECIDED': {'score': 85, 'advice': 'Going from brainstorm to decision is an excellent result.'},
        'ACTION_SET': {'score': 95, 'advice': 'An ideal brainstorm. Put the ideas into action immediately.'},
        'SHARED_ONLY': {'score': 50, 'advice': 'Inspiring but no tangible outcome. Reserve time for narrowing down next time.'},
        'DERAILED': {'score': 20, 'advice': 'Too divergent. Stick to a strict timebox.'},
    },
    'ONE_ON_ONE': {
        'DECIDED': {'score': 90, 'advice': 'A constructive 1on1. Check that the member\'s concerns were resolved.'},
        'ACTION_SET': {'score': 95, 'advice': 'Successful coaching. Goals were set and agreed.'},
        'SHARED_ONLY': {'score': 60, 'advice': 'This became a status report. Spend the time on deeper concerns and career topics.'},
        'DERAILED': {'score': 30, 'advice': 'Ended in small talk. Fine for rapport, but keep the cost in mind.'},
    },
}


def _check_score_table():
    missing = [(p, r) for p in PURPOSES for r in RESULTS
               if r not in SCORE_LOGIC.get(p, {})]
    if missing:
        raise ValueError(f"SCORE_LOGIC is missing cells: {missing}")
    for p in PURPOSES:
        for r in RESULTS:
            s = SCORE_LOGIC[p][r]['score']
            if not 0 <= s <= 100:
                raise ValueError(f"SCORE_LOGIC[{p}][{r}] score {s} outside 0-100")


_check_score_table()
