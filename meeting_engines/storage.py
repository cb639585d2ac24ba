"""
Meeting Cost Navigator — Key-Value Storage
Durable string store behind the history log. Both backends expose get(key) / set(key, value).
"""
import json
import os


class JsonFileStorage:
    """All keys live in one JSON object on disk; each set() rewrites the file."""

    def __init__(self, path):
        self.path = path

    def _read_all(self):
        if not os.path.exists(self.path):
            return {}
        with open(self.path, encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key):
        return self._read_all().get(key)

    def set(self, key, value):
        try:
            data = self._read_all()
        except ValueError:
            data = {}
        data[key] = value
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        tmp = self.path + '.tmp'
        with open(tmp, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False)
        os.replace(tmp, self.path)


class MemoryStorage:

    def __init__(self, initial=None):
        self.data = dict(initial or {})

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
