"""Aggregator — fold Records into per-group byte totals."""

from log_size_analyzer.parser import Record


class Aggregator:
    """Accumulates record sizes keyed by group. Order of adds does not matter."""

    def __init__(self):
        self._totals: dict[str, int] = {}

    def add(self, record: Record):
        self._totals[record.group] = self._totals.get(record.group, 0) + record.size

    @property
    def groups(self) -> dict[str, int]:
        return dict(self._totals)
