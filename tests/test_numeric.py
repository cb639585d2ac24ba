import math

import pytest

from meeting_engines.numeric import NumericField, to_number


@pytest.mark.parametrize('raw,expected', [
    (60, 60.0),
    (12.5, 12.5),
    ('45', 45.0),
    (' 7.5 ', 7.5),
    ('.5', 0.5),
    ('1e3', 1000.0),
    ('', 0.0),
    (None, 0.0),
])
def test_to_number(raw, expected):
    assert to_number(raw) == expected


@pytest.mark.parametrize('raw', ['abc', '1_000', '12px', 'nan', '--1', '1e999', '-1e400', float('inf')])
def test_to_number_rejects_garbage(raw):
    assert math.isnan(to_number(raw))


def test_numeric_field_keeps_raw_text():
    f = NumericField(60)
    f.set('')
    assert f.raw == ''
    assert f.value == 0
    f.set('90')
    assert f.value == 90
