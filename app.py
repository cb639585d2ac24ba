"""
Meeting Cost Navigator — Flask API Server
Form edits, live cost / quality / savings figures, saved history and exports.
Every mutation endpoint returns the freshly derived state.
"""
import io
import os
import traceback
from flask import Flask, jsonify, request, send_file
from meeting_engines.config import load_parameters, load_role_presets
from meeting_engines.feedback import Feedback
from meeting_engines.history import HISTORY_LIMIT
from meeting_engines.report import (CSV_HEADERS, build_workbook, csv_filename,
                                    history_csv_rows, write_csv)
from meeting_engines.session import MeetingSession
from meeting_engines.storage import JsonFileStorage
from meeting_engines.tables import (FREQUENCY_FACTORS, FREQUENCY_LABELS, PURPOSES,
                                    PURPOSE_LABELS, RESULTS, RESULT_LABELS)

app = Flask(__name__)

STATE = {'session': None, 'loaded': False}


def _load_session():
    params = load_parameters()
    STATE['session'] = MeetingSession(
        JsonFileStorage(params['historyFile']),
        presets=load_role_presets(),
        feedback=Feedback(seconds=params['feedbackSeconds']),
        history_key=params['storageKey'],
        history_limit=params.get('historyLimit', HISTORY_LIMIT),
    )
    STATE['loaded'] = True


@app.before_request
def _ensure_loaded():
    if not STATE['loaded'] and not STATE.get('_load_error'):
        try:
            _load_session()
            print(f"[OK] Meeting cost session loaded ({len(STATE['session'].history)} history items)")
        except Exception as e:
            err_msg = f"{type(e).__name__}: {e}"
            STATE['_load_error'] = err_msg
            print(f"\n{'='*60}")
            print(f"[!] SESSION LOAD FAILED")
            print(f"[!] Error: {err_msg}")
            print(f"[!] Fix the issue above, then restart python app.py")
            print(f"{'='*60}\n")
            traceback.print_exc()


def _session():
    return STATE['session']


def _build_state_object():
    """Everything the frontend renders: raw inputs, derived figures, errors, feedback."""
    s = _session()
    derived = s.derive()
    return {
        'form': s.form.snapshot(),
        'cost': derived['cost'],
        'quality': derived['quality'],
        'savings': derived['savings'],
        'errors': s.form.errors,
        'feedback': s.feedback.current,
        'historyCount': len(s.history),
    }


def _json_object(silent=False):
    """Request body as a dict, or None when it is not a JSON object."""
    body = request.get_json(force=True, silent=silent)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _bad_body():
    return jsonify({'error': 'request body must be a JSON object'}), 400


def _not_loaded():
    return jsonify({'error': 'Session not loaded',
                    'reason': STATE.get('_load_error', 'Unknown — check terminal')}), 503


# ══════════════════════════════════════════════════════════════
#  ROUTES
# ══════════════════════════════════════════════════════════════

@app.route('/api/state')
def api_state():
    if not STATE['loaded']: return _not_loaded()
    return jsonify(_build_state_object())


@app.route('/api/presets')
def api_presets():
    if not STATE['loaded']: return _not_loaded()
    return jsonify({
        'roles': _session().presets,
        'frequencies': [{'key': k, 'label': FREQUENCY_LABELS[k], 'factor': v}
                        for k, v in FREQUENCY_FACTORS.items()],
        'purposes': [{'key': k, 'label': PURPOSE_LABELS[k]} for k in PURPOSES],
        'results': [{'key': k, 'label': RESULT_LABELS[k]} for k in RESULTS],
    })


@app.route('/api/form', methods=['POST'])
def api_form():
    """Set one or more form fields: {"meetingName": "...", "duration": "45", ...}."""
    if not STATE['loaded']: return _not_loaded()
    body = _json_object()
    if body is None: return _bad_body()
    form = _session().form
    try:
        for key, value in body.items():
            form.set_field(key, value)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'status': 'ok', 'state': _build_state_object()})


@app.route('/api/participants', methods=['POST'])
def api_add_participant():
    if not STATE['loaded']: return _not_loaded()
    body = _json_object(silent=True)
    if body is None: return _bad_body()
    preset = body.get('preset')
    try:
        p = _session().form.add_participant(None if preset is None else int(preset))
    except (ValueError, TypeError) as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'status': 'ok', 'participant': p, 'state': _build_state_object()})


@app.route('/api/participants/<pid>', methods=['POST'])
def api_update_participant(pid):
    if not STATE['loaded']: return _not_loaded()
    fields = _json_object()
    if fields is None: return _bad_body()
    try:
        p = _session().form.update_participant(pid, fields)
    except KeyError:
        return jsonify({'error': f'Participant {pid} not found'}), 404
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'status': 'ok', 'participant': p, 'state': _build_state_object()})


@app.route('/api/participants/<pid>', methods=['DELETE'])
def api_remove_participant(pid):
    if not STATE['loaded']: return _not_loaded()
    try:
        removed = _session().form.remove_participant(pid)
    except KeyError:
        return jsonify({'error': f'Participant {pid} not found'}), 404
    return jsonify({'status': 'ok', 'removed': removed, 'state': _build_state_object()})


@app.route('/api/validate', methods=['POST'])
def api_validate():
    if not STATE['loaded']: return _not_loaded()
    ok = _session().form.validate()
    return jsonify({'valid': ok, 'errors': _session().form.errors})


@app.route('/api/history')
def api_history():
    if not STATE['loaded']: return _not_loaded()
    return jsonify({'items': _session().history.items})


@app.route('/api/history', methods=['POST'])
def api_save_history():
    if not STATE['loaded']: return _not_loaded()
    item = _session().save_to_history()
    if item is None:
        return jsonify({'status': 'invalid', 'errors': _session().form.errors}), 400
    return jsonify({'status': 'ok', 'item': item, 'state': _build_state_object()})


@app.route('/api/history/<item_id>/restore', methods=['POST'])
def api_restore_history(item_id):
    if not STATE['loaded']: return _not_loaded()
    try:
        _session().restore_history(item_id)
    except KeyError:
        return jsonify({'error': f'History item {item_id} not found'}), 404
    return jsonify({'status': 'ok', 'state': _build_state_object()})


@app.route('/api/history/clear', methods=['POST'])
def api_clear_history():
    """Requires {"confirm": true}; history and the form are both reset."""
    if not STATE['loaded']: return _not_loaded()
    body = _json_object(silent=True)
    if body is None: return _bad_body()
    if not _session().clear_all(lambda: body.get('confirm') is True):
        return jsonify({'error': 'confirm must be true to clear history and form'}), 400
    return jsonify({'status': 'ok', 'state': _build_state_object()})


@app.route('/api/copy/<kind>', methods=['POST'])
def api_copy(kind):
    if not STATE['loaded']: return _not_loaded()
    try:
        text, ok = _session().copy(kind)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify({'status': 'ok', 'text': text, 'copied': ok,
                    'feedback': _session().feedback.current})


@app.route('/api/clipboard')
def api_clipboard():
    if not STATE['loaded']: return _not_loaded()
    return jsonify({'text': getattr(_session().clipboard, 'text', None)})


@app.route('/api/export/csv')
def api_export_csv():
    if not STATE['loaded']: return _not_loaded()
    items = _session().history.items
    if not items:
        return jsonify({'error': 'No history to export'}), 400
    payload = write_csv(CSV_HEADERS, history_csv_rows(items))
    return send_file(io.BytesIO(payload), as_attachment=True,
                     download_name=csv_filename(), mimetype='text/csv; charset=utf-8')


@app.route('/api/export')
def api_export():
    """Export the current calculation and history to Excel."""
    if not STATE['loaded']: return _not_loaded()
    try:
        s = _session()
        d = s.derive()
        buf = build_workbook(s.history.items, s.form.snapshot(), d['cost'], d['savings'], d['quality'])
        return send_file(buf, as_attachment=True, download_name='MeetingCost_Export.xlsx',
                         mimetype='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet')
    except Exception as e:
        traceback.print_exc()
        return jsonify({'error': str(e)}), 500


if __name__ == '__main__':
    app.run(debug=False, host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
