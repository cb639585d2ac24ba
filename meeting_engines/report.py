"""
Meeting Cost Navigator — Reports & Exports
Currency formatting, clipboard texts, CSV rows and the XLSX workbook.
"""
import io
import math
from datetime import date, datetime

import openpyxl
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from meeting_engines.tables import FREQUENCY_LABELS, PURPOSE_LABELS, RESULT_LABELS

CSV_HEADERS = ['Date', 'Meeting', 'Duration (min)', 'Frequency', 'Purpose', 'Outcome',
               'One-time cost', 'Monthly cost', 'Annual cost', 'Score']

TEMPLATE_KINDS = ('agenda', 'next', 'minutes')


def format_currency(amount):
    """Yen, rounded half up to an integer: 21000.4 -> '￥21,000'."""
    n = math.floor(amount + 0.5)
    sign = '-' if n < 0 else ''
    return f"{sign}￥{abs(n):,}"


def _num(v):
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)


def _label(labels, key):
    return labels.get(key, key or '-')


def build_summary(snapshot, cost, quality):
    valid = cost['isValid']
    money = lambda v: format_currency(v) if valid else '-'
    return '\n'.join([
        '[Meeting cost report]',
        f"Meeting: {snapshot['meetingName']}",
        f"Duration: {_num(snapshot['duration'])} min ({_label(FREQUENCY_LABELS, snapshot['frequency'])})",
        f"Participants: {_num(cost['totalParticipants'])}",
        f"One-time cost: {money(cost['oneTimeCost'])}",
        f"Monthly cost: {money(cost['monthlyCost'])}",
        f"Annual cost: {money(cost['annualCost'])}",
        f"Quality score: {quality['score']}/100",
        f"Advice: {quality['advice']}",
    ])


def build_template(kind, snapshot, cost, today=None):
    name = snapshot['meetingName']
    purpose = _label(PURPOSE_LABELS, snapshot['purpose'])
    headcount = _num(cost['totalParticipants'])
    if kind == 'agenda':
        goal = 'Final check of decided items' if snapshot['result'] == 'DECIDED' else 'Goal of this meeting'
        return '\n'.join([
            '[Agenda template]',
            f"Meeting: {name}",
            f"Purpose: {purpose}",
            'Topics:',
            '1. ',
            '2. ',
            f"To decide: {goal}",
            'Pre-reads: ',
            'Take-aways: ',
        ])
    if kind == 'next':
        return '\n'.join([
            '[Next agenda draft]',
            f"Last outcome: {_label(RESULT_LABELS, snapshot['result'])}",
            f"Participants: {headcount}",
            '1. Review of last meeting and ToDo progress (10 min)',
            f"2. Main topic: discussion on {purpose} (25 min)",
            f"3. Improving how {name} is run (10 min)",
            '4. Define next actions (5 min)',
        ])
    if kind == 'minutes':
        day = today or date.today()
        return '\n'.join([
            '[Minutes format]',
            f"Meeting: {name}",
            f"Date: {day.strftime('%Y/%m/%d')}",
            f"Participants: {headcount}",
            'Decisions:',
            '- ',
            'ToDo / due / owner:',
            '- ',
            'Notes: ',
        ])
    raise ValueError(f"Unknown template '{kind}'")


# ══════════════════════════════════════════════════════════════
#  CSV
# ══════════════════════════════════════════════════════════════

def csv_field(value, delimiter=','):
    text = str(value)
    if delimiter in text or '"' in text or '\n' in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def history_csv_rows(items):
    rows = []
    for h in items:
        when = datetime.fromtimestamp(h['timestamp'] / 1000).strftime('%Y/%m/%d %H:%M:%S')
        rows.append([
            csv_field(when),
            csv_field(h['name']),
            csv_field(_num(h['duration'])),
            csv_field(_label(FREQUENCY_LABELS, h['frequency'])),
            csv_field(_label(PURPOSE_LABELS, h['purpose'])),
            csv_field(_label(RESULT_LABELS, h['result'])),
            f"{h['oneTimeCost']:.0f}",
            f"{h['monthlyCost']:.0f}",
            f"{h['annualCost']:.0f}",
            str(h['score']),
        ])
    return rows


def write_csv(headers, rows):
    """Join pre-quoted fields; no escaping happens here. UTF-8 with BOM for spreadsheet apps."""
    content = '\n'.join([','.join(headers)] + [','.join(r) for r in rows])
    return ('\ufeff' + content).encode('utf-8')


def csv_filename(today=None):
    return f"meeting_cost_history_{(today or date.today()).isoformat()}.csv"


# ══════════════════════════════════════════════════════════════
#  XLSX
# ══════════════════════════════════════════════════════════════

def build_workbook(items, snapshot, cost, savings, quality):
    """History plus the current calculation as an .xlsx payload."""
    wb = openpyxl.Workbook()
    hf = Font(bold=True, color='FFFFFF', size=11)
    hfill = PatternFill(start_color='2E2E38', end_color='2E2E38', fill_type='solid')
    tb = Border(left=Side(style='thin'), right=Side(style='thin'),
                top=Side(style='thin'), bottom=Side(style='thin'))

    def ws_write(ws, headers, rows):
        for c, h in enumerate(headers, 1):
            cell = ws.cell(row=1, column=c, value=h)
            cell.font = hf; cell.fill = hfill; cell.alignment = Alignment(horizontal='center'); cell.border = tb
        for r, row in enumerate(rows, 2):
            for c, val in enumerate(row, 1):
                cell = ws.cell(row=r, column=c, value=val); cell.border = tb
        for col in ws.columns:
            ml = max(len(str(cell.value or '')) for cell in col)
            ws.column_dimensions[col[0].column_letter].width = min(ml + 2, 40)

    money = lambda v: format_currency(v) if cost['isValid'] else '-'

    # 1. Current calculation
    ws = wb.active; ws.title = 'Current'
    ws_write(ws, ['Metric', 'Value'], [
        ['Meeting', snapshot['meetingName']],
        ['Duration (min)', _num(snapshot['duration'])],
        ['Frequency', _label(FREQUENCY_LABELS, snapshot['frequency'])],
        ['Purpose', _label(PURPOSE_LABELS, snapshot['purpose'])],
        ['Outcome', _label(RESULT_LABELS, snapshot['result'])],
        ['Participants', _num(cost['totalParticipants'])],
        ['One-time cost', money(cost['oneTimeCost'])],
        ['Monthly cost', money(cost['monthlyCost'])],
        ['Annual cost', money(cost['annualCost'])],
        ['Monthly savings', format_currency(savings['monthly'])],
        ['Annual savings', format_currency(savings['annual'])],
        ['Quality score', quality['score']],
        ['Advice', quality['advice']],
    ])

    # 2. Participants
    ws2 = wb.create_sheet('Participants')
    ws_write(ws2, ['Role', 'Hourly rate', 'Count'], [
        [p.get('role', ''), str(p.get('hourlyRate', '')), str(p.get('count', ''))]
        for p in snapshot['participants']
    ])

    # 3. History
    ws3 = wb.create_sheet('History')
    ws_write(ws3, CSV_HEADERS, [
        [datetime.fromtimestamp(h['timestamp'] / 1000).strftime('%Y/%m/%d %H:%M:%S'),
         h['name'], h['duration'],
         _label(FREQUENCY_LABELS, h['frequency']), _label(PURPOSE_LABELS, h['purpose']),
         _label(RESULT_LABELS, h['result']),
         round(h['oneTimeCost']), round(h['monthlyCost']), round(h['annualCost']), h['score']]
        for h in items
    ])

    buf = io.BytesIO()
    wb.save(buf)
    buf.seek(0)
    return buf
