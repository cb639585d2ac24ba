"""
Meeting Cost Navigator — Configuration Loader
Parameters and role presets from data/config/*.xlsx, falling back to built-in defaults.
Environment variables override the file-based values.
"""
import logging
import os

import openpyxl

from meeting_engines.tables import DEFAULT_ROLE_PRESETS

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def data_dir():
    return os.environ.get('MEETING_COST_DATA_DIR', os.path.join(BASE_DIR, 'data'))


def read_xlsx_sheet(filepath, sheet_name=None):
    wb = openpyxl.load_workbook(filepath, read_only=True, data_only=True)
    ws = wb[sheet_name] if sheet_name else wb.active
    rows = list(ws.iter_rows(values_only=True))
    wb.close()
    if len(rows) < 2:
        return []
    headers = [str(h).strip() if h else f'col_{i}' for i, h in enumerate(rows[0])]
    return [dict(zip(headers, row)) for row in rows[1:]]


def load_parameters():
    """Load parameters from config/parameters.xlsx (columns: Parameter, Value)."""
    base = data_dir()
    p = _default_params(base)
    path = os.path.join(base, 'config', 'parameters.xlsx')
    if os.path.exists(path):
        param_map = {
            'History Limit': 'historyLimit', 'Storage Key': 'storageKey',
            'History File': 'historyFile', 'Feedback Seconds': 'feedbackSeconds',
        }
        try:
            rows = read_xlsx_sheet(path)
        except Exception as e:
            logging.warning(f"Could not read {path}, using defaults: {type(e).__name__}: {e}")
            rows = []
        for row in rows:
            key = str(row.get('Parameter', '')).strip()
            val = row.get('Value')
            if key in param_map and val is not None:
                mapped = param_map[key]
                if mapped in ('historyLimit', 'feedbackSeconds'):
                    try:
                        val = int(float(val))
                    except ValueError:
                        logging.warning(f"Ignoring non-numeric {key}={val!r}")
                        continue
                elif mapped == 'historyFile' and not os.path.isabs(str(val)):
                    val = os.path.join(base, str(val))
                p[mapped] = val

    if os.environ.get('MEETING_COST_HISTORY_FILE'):
        p['historyFile'] = os.environ['MEETING_COST_HISTORY_FILE']
    return p


def _default_params(base):
    return {
        'historyLimit': 20,
        'storageKey': 'meeting_cost_history',
        'historyFile': os.path.join(base, 'history.json'),
        'feedbackSeconds': 3,
    }


def load_role_presets():
    """Role presets from config/role_presets.xlsx (columns: Role, Hourly Rate)."""
    path = os.path.join(data_dir(), 'config', 'role_presets.xlsx')
    if not os.path.exists(path):
        return [dict(p) for p in DEFAULT_ROLE_PRESETS]
    try:
        rows = read_xlsx_sheet(path)
    except Exception as e:
        logging.warning(f"Could not read {path}, using default presets: {type(e).__name__}: {e}")
        return [dict(p) for p in DEFAULT_ROLE_PRESETS]
    presets = []
    for r in rows:
        role = r.get('Role')
        rate = r.get('Hourly Rate')
        if not role or rate is None:
            continue
        try:
            presets.append({'role': str(role).strip(), 'hourlyRate': float(rate)})
        except (ValueError, TypeError):
            logging.warning(f"Skipping role preset {role!r}: bad rate {rate!r}")
    return presets if presets else [dict(p) for p in DEFAULT_ROLE_PRESETS]
