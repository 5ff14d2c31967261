from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Dict, Any


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


def _level_no(level: str, fallback: int) -> int:
    return _LEVELS.get(level.upper(), fallback)


class ConsoleLogger:
    """Writes one line per record to stderr, as text or compact JSON.

    Level names are case-insensitive; unknown names fall back to WARN.
    """
    def __init__(self, name: str = "optchain", level: str = "WARN", json_output: bool = False, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.level = _level_no(level, _LEVELS["WARN"])
        self.json_output = json_output
        self.context = dict(context or {})

    def bind(self, **fields: Any) -> "ConsoleLogger":
        child = ConsoleLogger(self.name, json_output=self.json_output, context={**self.context, **fields})
        child.level = self.level
        return child

    def enabled(self, level: str) -> bool:
        return _level_no(level, _LEVELS["ERROR"]) >= self.level

    def _render(self, level: str, msg: str, fields: Dict[str, Any]) -> str:
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        if self.json_output:
            rec: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if fields: rec["fields"] = fields
            return json.dumps(rec, separators=(",", ":"), default=repr)
        extras = "".join(f" {k}={v}" for k, v in sorted(fields.items()))
        return f"[{ts}] {self.name} {level}: {msg}{extras}"

    def _log(self, level: str, msg: str, **fields: Any) -> None:
        if self.enabled(level):
            print(self._render(level, msg, {**self.context, **fields}), file=sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self._log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self._log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self._log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self._log("ERROR", msg, **fields)
