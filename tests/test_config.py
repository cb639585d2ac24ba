import os

import openpyxl
import pytest

from meeting_engines.config import load_parameters, load_role_presets
from meeting_engines.tables import DEFAULT_ROLE_PRESETS


def _write_sheet(path, rows):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    wb = openpyxl.Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    wb.save(path)


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv('MEETING_COST_DATA_DIR', str(tmp_path))
    monkeypatch.delenv('MEETING_COST_HISTORY_FILE', raising=False)
    return tmp_path


def test_defaults_without_files(data_dir):
    p = load_parameters()
    assert p['historyLimit'] == 20
    assert p['storageKey'] == 'meeting_cost_history'
    assert p['historyFile'] == os.path.join(str(data_dir), 'history.json')
    assert p['feedbackSeconds'] == 3
    assert load_role_presets() == DEFAULT_ROLE_PRESETS


def test_parameters_sheet_overrides(data_dir):
    _write_sheet(str(data_dir / 'config' / 'parameters.xlsx'), [
        ['Parameter', 'Value'],
        ['History Limit', 10],
        ['Feedback Seconds', '5'],
        ['History File', 'store/h.json'],
        ['Unknown', 'ignored'],
    ])
    p = load_parameters()
    assert p['historyLimit'] == 10
    assert p['feedbackSeconds'] == 5
    assert p['historyFile'] == os.path.join(str(data_dir), 'store/h.json')


def test_env_history_file_wins(data_dir, monkeypatch):
    monkeypatch.setenv('MEETING_COST_HISTORY_FILE', '/tmp/elsewhere.json')
    assert load_parameters()['historyFile'] == '/tmp/elsewhere.json'


def test_role_presets_sheet(data_dir):
    _write_sheet(str(data_dir / 'config' / 'role_presets.xlsx'), [
        ['Role', 'Hourly Rate'],
        ['Engineer', 6000],
        ['Designer', 'n/a'],
        [None, 1000],
    ])
    assert load_role_presets() == [{'role': 'Engineer', 'hourlyRate': 6000.0}]


def test_unreadable_presets_fall_back(data_dir):
    path = data_dir / 'config' / 'role_presets.xlsx'
    os.makedirs(path.parent, exist_ok=True)
    path.write_bytes(b'not a workbook')
    assert load_role_presets() == DEFAULT_ROLE_PRESETS
