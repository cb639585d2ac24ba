"""
Meeting Cost Navigator — History Store
Newest-first, capped log of saved calculations. Every mutation rewrites the whole
list into the backing key-value storage; a failed load starts from an empty history.
"""
import copy
import json
import logging
import math
import time
import uuid

from meeting_engines.numeric import to_number
from meeting_engines.tables import FREQUENCY_FACTORS, PURPOSES, RESULTS

HISTORY_LIMIT = 20
HISTORY_KEY = 'meeting_cost_history'

ITEM_KEYS = ('id', 'timestamp', 'name', 'duration', 'frequency', 'purpose', 'result',
             'participants', 'oneTimeCost', 'monthlyCost', 'annualCost', 'score')
NUMERIC_KEYS = ('timestamp', 'duration', 'oneTimeCost', 'monthlyCost', 'annualCost', 'score')


def is_history_item(item):
    if not isinstance(item, dict) or any(k not in item for k in ITEM_KEYS):
        return False
    if not isinstance(item['id'], str) or not isinstance(item['name'], str):
        return False
    if not isinstance(item['frequency'], str) or item['frequency'] not in FREQUENCY_FACTORS:
        return False
    if item['purpose'] not in PURPOSES + (None,) or item['result'] not in RESULTS + (None,):
        return False
    participants = item['participants']
    if not isinstance(participants, list) or not all(isinstance(p, dict) for p in participants):
        return False
    return all(isinstance(item[k], (int, float)) and not isinstance(item[k], bool)
               and math.isfinite(item[k]) for k in NUMERIC_KEYS)


def make_history_item(snapshot, cost, quality, timestamp=None):
    """Freeze the current inputs and derived figures into a history record."""
    return {
        'id': uuid.uuid4().hex[:9],
        'timestamp': timestamp if timestamp is not None else int(time.time() * 1000),
        'name': snapshot['meetingName'],
        'duration': to_number(snapshot['duration']),
        'frequency': snapshot['frequency'],
        'purpose': snapshot['purpose'],
        'result': snapshot['result'],
        'participants': copy.deepcopy(snapshot['participants']),
        'oneTimeCost': cost['oneTimeCost'],
        'monthlyCost': cost['monthlyCost'],
        'annualCost': cost['annualCost'],
        'score': quality['score'],
    }


class HistoryStore:

    def __init__(self, storage, key=HISTORY_KEY, limit=HISTORY_LIMIT):
        self.storage = storage
        self.key = key
        self.limit = limit
        self._items = []

    @property
    def items(self):
        return copy.deepcopy(self._items)

    def __len__(self):
        return len(self._items)

    def get(self, item_id):
        for item in self._items:
            if item['id'] == item_id:
                return copy.deepcopy(item)
        raise KeyError(item_id)

    def load(self):
        try:
            raw = self.storage.get(self.key)
            if raw is None:
                self._items = []
                return self.items
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            items = [i for i in data if is_history_item(i)]
            if len(items) < len(data):
                logging.warning(f"Dropped {len(data) - len(items)} malformed history entries from '{self.key}'")
            self._items = items[:self.limit]
        except Exception as e:
            logging.warning(f"History parse error for '{self.key}', starting empty: {type(e).__name__}: {e}")
            self._items = []
        return self.items

    def save(self, item):
        self._items = [copy.deepcopy(item)] + self._items
        del self._items[self.limit:]
        self._persist()
        return copy.deepcopy(item)

    def clear(self):
        self._items = []
        self._persist()

    def _persist(self):
        try:
            self.storage.set(self.key, json.dumps(self._items, ensure_ascii=False))
        except Exception:
            logging.exception(f"Failed to persist history to '{self.key}'")
