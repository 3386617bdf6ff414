"""Record parser — one NDJSON line in, a Record or a ParseFailure out."""

import json
from dataclasses import dataclass

GROUP_KEY = "type"


@dataclass(frozen=True)
class Record:
    group: str
    size: int


@dataclass(frozen=True)
class ParseFailure:
    context: str


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_line(raw: str, group_key: str = GROUP_KEY) -> Record | ParseFailure:
    """Decode a single raw line.

    The line must be a JSON object holding a string under ``group_key``.
    Anything else (bad syntax, non-object value, missing key, non-string
    value) yields a ParseFailure carrying the raw line.

    ``size`` is the UTF-8 byte length of ``raw`` itself, not of the payload.
    """
    try:
        obj = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return ParseFailure(context=raw)

    if not isinstance(obj, dict):
        return ParseFailure(context=raw)

    group = obj.get(group_key)
    if not isinstance(group, str):
        return ParseFailure(context=raw)

    return Record(group=group, size=len(raw.encode("utf-8")))


class RecordParser:
    """parse_line bound to a grouping key chosen at construction."""

    def __init__(self, group_key: str = GROUP_KEY):
        self.group_key = group_key

    def parse(self, raw: str) -> Record | ParseFailure:
        return parse_line(raw, group_key=self.group_key)
