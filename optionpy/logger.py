from __future__ import annotations
import sys, datetime as _dt, json
from typing import Optional, Any


_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Writes contract-violation traces to stderr, one line per record.

    The package only emits ``DEBUG`` records, so a logger at the default
    ``INFO`` level prints nothing.
    """
    def __init__(self, name: str = "optionpy", level: str = "INFO", json_output: bool = False):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def debug(self, msg: str, **fields: Any) -> None:
        if _LEVELS["DEBUG"] < self.level:
            return
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        if self.json_output:
            data = {"ts": ts, "name": self.name, "level": "DEBUG", "msg": msg}
            if fields:
                data["fields"] = fields
            print(json.dumps(data, separators=(",", ":"), default=str), file=sys.stderr)
        else:
            extras = "".join([f" {k}={v}" for k, v in sorted(fields.items())])
            print(f"[{ts}] {self.name} DEBUG: {msg}{extras}", file=sys.stderr)


_default = ConsoleLogger()


def get_logger() -> ConsoleLogger:
    return _default


def set_logger(logger: ConsoleLogger) -> ConsoleLogger:
    """Replace the package logger and return the previous one."""
    global _default
    previous, _default = _default, logger
    return previous


def configure(level: Optional[str] = None, json_output: Optional[bool] = None) -> ConsoleLogger:
    if level is not None:
        _default.set_level(level)
    if json_output is not None:
        _default.json_output = json_output
    return _default
