# config_manager.py - JSON config manager

import json
import os

from .logger_utils import log

DEFAULTS = {
    "ordering": "natural",  # tree ordering used to build the index
    "report": "alpha",      # alpha | frequency | highest | stats
    "limit": 0,             # rows to show, 0 = all
    "encoding": "latin-1",
    "use_color": True,
}

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class Config:
    def __init__(self, path="word_index.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.warning(f"config {self.path} unreadable, using defaults ({e})")
            return
        if not isinstance(loaded, dict):
            log.warning(f"config {self.path} is not a JSON object, using defaults")
            return
        self.data.update(loaded)
        self._normalize()

    def _normalize(self):
        """Bring known options back to their default types; bad values fall back to the default."""
        for key, default in DEFAULTS.items():
            val = self.data.get(key)
            if val is None:
                self.data[key] = default
                continue
            try:
                self.data[key] = _coerce(default, val)
            except (TypeError, ValueError):
                log.warning(f"config {self.path}: bad value for {key!r} ({val!r}), using {default!r}")
                self.data[key] = default

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v}")

    def set(self, key, val):
        if key not in self.data:
            raise KeyError(f"No such option: {key}")
        self.data[key] = _coerce(self.data[key], val)
        self.save()


def _coerce(current, val):
    """Convert `val` to the type of the current value (strings come from the command line)."""
    if isinstance(current, bool):
        if isinstance(val, bool):
            return val
        s = str(val).strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ValueError(f"not a boolean: {val!r}")
    return type(current)(val)
