"""
Result Set
==========

Decodes raw ``GRAPH.QUERY`` / ``GRAPH.DELETE`` replies.

Reply shapes (verbose, non-compact mode):
    [stats]                  write-only query
    [header, rows, stats]    query with a RETURN clause
    "status line"            GRAPH.DELETE

Statistics lines look like ``"Nodes created: 2"`` or
``"Query internal execution time: 0.31 milliseconds"``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

import structlog

log = structlog.get_logger()

LABELS_ADDED = "Labels added"
NODES_CREATED = "Nodes created"
NODES_DELETED = "Nodes deleted"
PROPERTIES_SET = "Properties set"
RELATIONSHIPS_CREATED = "Relationships created"
RELATIONSHIPS_DELETED = "Relationships deleted"
INTERNAL_EXECUTION_TIME = "internal execution time"


def _decode(value: Any) -> Any:
    """Recursively decode bytes to str."""
    if isinstance(value, bytes):
        return value.decode("utf-8")
    if isinstance(value, (list, tuple)):
        return [_decode(item) for item in value]
    return value


def _parse_statistics(lines: List[Any]) -> Dict[str, float]:
    stats: Dict[str, float] = {}
    for line in lines:
        if not isinstance(line, str) or ":" not in line:
            log.debug(f"Skipping unparseable statistics line: {line!r}")
            continue
        name, _, raw = line.rpartition(":")
        value = raw.strip().split(" ")[0]
        try:
            stats[name.strip()] = float(value)
        except ValueError:
            log.debug(f"Skipping unparseable statistics line: {line!r}")
    return stats


@dataclass
class ResultSet:
    """
    Decoded server reply.

    Attributes:
        header: Column names
        rows: Result rows, one list of values per row
        statistics: Execution statistics by name

    Example:
        result = ResultSet.from_reply(raw_reply)
        for record in result.records:
            print(record["name"])
        print(result.nodes_created, result.run_time_ms)
    """
    header: List[str] = field(default_factory=list)
    rows: List[List[Any]] = field(default_factory=list)
    statistics: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_reply(cls, reply: Any) -> "ResultSet":
        reply = _decode(reply)

        if not isinstance(reply, list):
            return cls(statistics=_parse_statistics([reply]))

        if len(reply) == 1:
            return cls(statistics=_parse_statistics(reply[0]))

        header = [
            # Some servers send [column_type, name] pairs
            column[-1] if isinstance(column, list) else column
            for column in reply[0]
        ]
        rows = [list(row) for row in reply[1]]
        stats = _parse_statistics(reply[2]) if len(reply) > 2 else {}
        return cls(header=header, rows=rows, statistics=stats)

    @property
    def records(self) -> List[Dict[str, Any]]:
        """Rows as dicts keyed by column name."""
        return [dict(zip(self.header, row)) for row in self.rows]

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def _stat(self, name: str) -> int:
        return int(self.statistics.get(name, 0))

    @property
    def labels_added(self) -> int:
        return self._stat(LABELS_ADDED)

    @property
    def nodes_created(self) -> int:
        return self._stat(NODES_CREATED)

    @property
    def nodes_deleted(self) -> int:
        return self._stat(NODES_DELETED)

    @property
    def properties_set(self) -> int:
        return self._stat(PROPERTIES_SET)

    @property
    def relationships_created(self) -> int:
        return self._stat(RELATIONSHIPS_CREATED)

    @property
    def relationships_deleted(self) -> int:
        return self._stat(RELATIONSHIPS_DELETED)

    @property
    def run_time_ms(self) -> float:
        for name, value in self.statistics.items():
            if name.endswith(INTERNAL_EXECUTION_TIME):
                return value
        return 0.0

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[List[Any]]:
        return iter(self.rows)
