"""Stream processor — read, parse, route failures to warnings, aggregate."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from log_size_analyzer.aggregator import Aggregator
from log_size_analyzer.parser import GROUP_KEY, ParseFailure, RecordParser
from log_size_analyzer.reader import LineReadFailure

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    groups: dict[str, int] = field(default_factory=dict)
    lines_read: int = 0
    records_parsed: int = 0
    parse_failures: int = 0
    read_failures: int = 0

    @property
    def skipped(self) -> int:
        return self.parse_failures + self.read_failures

    @property
    def total_bytes(self) -> int:
        return sum(self.groups.values())


def read_failure_message(failure: LineReadFailure) -> str:
    return f"Could not read line: {failure.reason}"


def parse_failure_message(failure: ParseFailure, group_key: str) -> str:
    return (
        f'Wrongly formatted object: "{failure.context}". Object needs to be valid '
        f'structured data containing a "{group_key}" field of type String.'
    )


def process_lines(
    lines: Iterable[str | LineReadFailure],
    group_key: str = GROUP_KEY,
    on_warning: Callable[[str], None] | None = None,
) -> ProcessResult:
    """Fold a line source into per-group byte totals.

    Lines that cannot be read or parsed are reported through ``on_warning``
    (default: logger.warning) and skipped. Never raises for bad input lines;
    an empty or fully malformed source yields an empty map.
    """
    warn = on_warning if on_warning is not None else logger.warning
    parser = RecordParser(group_key)
    agg = Aggregator()
    result = ProcessResult()

    for line in lines:
        result.lines_read += 1

        if isinstance(line, LineReadFailure):
            result.read_failures += 1
            warn(read_failure_message(line))
            continue

        outcome = parser.parse(line)
        if isinstance(outcome, ParseFailure):
            result.parse_failures += 1
            warn(parse_failure_message(outcome, group_key))
            continue

        logger.debug("Line %d: group=%r size=%d", result.lines_read, outcome.group, outcome.size)
        result.records_parsed += 1
        agg.add(outcome)

    result.groups = agg.groups
    return result
