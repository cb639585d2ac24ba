"""
Meeting Cost Navigator — Form / Validation State
Holds the draft inputs for one meeting and produces a field-keyed error map.
"""
import copy
import math
import uuid

from meeting_engines.numeric import NumericField, to_number
from meeting_engines.tables import DEFAULT_ROLE_PRESETS, FREQUENCY_FACTORS, PURPOSES, RESULTS

DEFAULTS = {
    'meetingName': 'Weekly sync',
    'duration': 60,
    'frequency': 'WEEKLY',
    'purpose': 'SHARE',
    'result': 'SHARED_ONLY',
    'reductionMins': 15,
}

PARTICIPANT_FIELDS = ('role', 'hourlyRate', 'count')

MANAGER, MEMBER = 2, 3


def new_id():
    return uuid.uuid4().hex[:9]


class FormState:

    def __init__(self, presets=None):
        self.presets = presets or DEFAULT_ROLE_PRESETS
        self.errors = {}
        self.meeting_name = DEFAULTS['meetingName']
        self.duration = NumericField(DEFAULTS['duration'])
        self.frequency = DEFAULTS['frequency']
        self.purpose = DEFAULTS['purpose']
        self.result = DEFAULTS['result']
        self.reduction_mins = NumericField(DEFAULTS['reductionMins'])
        self.participants = [
            self._from_preset(MANAGER, count=1, pid='1'),
            self._from_preset(MEMBER, count=3, pid='2'),
        ]

    def _from_preset(self, index, count=1, pid=None):
        # Configured preset lists may be shorter than the built-in one
        preset = self.presets[index] if index < len(self.presets) else DEFAULT_ROLE_PRESETS[index]
        return {'id': pid or self._fresh_id(), 'role': preset['role'],
                'hourlyRate': preset['hourlyRate'], 'count': count}

    def _fresh_id(self):
        taken = {p['id'] for p in self.participants}
        pid = new_id()
        while pid in taken:
            pid = new_id()
        return pid

    def _find(self, pid):
        for p in self.participants:
            if p['id'] == pid:
                return p
        raise KeyError(pid)

    # ── Fields ──

    def set_field(self, name, value):
        if name == 'meetingName':
            self.meeting_name = '' if value is None else str(value)
        elif name == 'duration':
            self.duration.set(value)
        elif name == 'reductionMins':
            self.reduction_mins.set(value)
        elif name == 'frequency':
            if not isinstance(value, str) or value not in FREQUENCY_FACTORS:
                raise ValueError(f"Unknown frequency '{value}'")
            self.frequency = value
        elif name == 'purpose':
            if value is not None and value not in PURPOSES:
                raise ValueError(f"Unknown purpose '{value}'")
            self.purpose = value
        elif name == 'result':
            if value is not None and value not in RESULTS:
                raise ValueError(f"Unknown result '{value}'")
            self.result = value
        else:
            raise ValueError(f"Unknown field '{name}'")

    # ── Participants ──

    def add_participant(self, preset_index=None):
        if preset_index is None:
            p = {'id': self._fresh_id(), 'role': '', 'hourlyRate': 0, 'count': 1}
        else:
            if not 0 <= preset_index < len(self.presets):
                raise ValueError(f"Unknown role preset {preset_index}")
            p = self._from_preset(preset_index)
        self.participants.append(p)
        return p

    def update_participant(self, pid, fields):
        p = self._find(pid)
        unknown = [k for k in fields if k not in PARTICIPANT_FIELDS]
        if unknown:
            raise ValueError(f"Unknown participant field(s) {unknown}")
        p.update(fields)
        return p

    def remove_participant(self, pid):
        if len(self.participants) <= 1:
            return False
        self._find(pid)
        self.participants = [p for p in self.participants if p['id'] != pid]
        return True

    # ── Validation ──

    def validate(self):
        errors = {}
        if not self.meeting_name:
            errors['meetingName'] = 'Enter a meeting name'
        d = self.duration.value
        if math.isnan(d) or d <= 0:
            errors['duration'] = 'Duration must be at least 1 minute'

        for p in self.participants:
            rate = to_number(p.get('hourlyRate'))
            count = to_number(p.get('count'))
            if math.isnan(rate) or rate < 0:
                errors[f"rate_{p['id']}"] = 'Hourly rate must be 0 or more'
            if math.isnan(count) or count < 0 or not count.is_integer():
                errors[f"count_{p['id']}"] = 'Headcount must be a whole number, 0 or more'
            if not p.get('role'):
                errors[f"role_{p['id']}"] = 'Enter a role'

        self.errors = errors
        return not errors

    # ── Snapshots ──

    def snapshot(self):
        return {
            'meetingName': self.meeting_name,
            'duration': self.duration.raw,
            'frequency': self.frequency,
            'purpose': self.purpose,
            'result': self.result,
            'reductionMins': self.reduction_mins.raw,
            'participants': copy.deepcopy(self.participants),
        }

    def restore(self, item):
        """Copy a history item's raw inputs back; derived figures are recomputed by the caller."""
        self.meeting_name = item['name']
        self.duration.set(item['duration'])
        self.frequency = item['frequency']
        self.purpose = item['purpose']
        self.result = item['result']
        self.participants = copy.deepcopy(item['participants'])
        self.errors = {}

    def reset(self):
        self.meeting_name = DEFAULTS['meetingName']
        self.duration.set(DEFAULTS['duration'])
        self.frequency = DEFAULTS['frequency']
        self.purpose = DEFAULTS['purpose']
        self.result = DEFAULTS['result']
        self.reduction_mins.set(DEFAULTS['reductionMins'])
        self.participants = [self._from_preset(MANAGER, count=1, pid='1')]
        self.errors = {}
