"""
Tab-delimited edge stream reader.

Input is a link dump with one header line followed by records of exactly
four tab-separated fields; the second field is the source identifier and
the fourth the target. Records with any other field count are skipped.
"""

from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, List

from pagerank import Pagerank

FIELD_COUNT = 4
SOURCE_FIELD = 1
TARGET_FIELD = 3


@dataclass(frozen=True)
class IngestStats:
    records: int  # lines after the header
    edges: int
    skipped: int


def _records(lines: Iterable[str]) -> Iterator[List[str]]:
    for line in islice(lines, 1, None):
        yield line.strip().split("\t")


def ingest_lines(pagerank: Pagerank[str], lines: Iterable[str]) -> IngestStats:
    """Feed every well-formed record of lines into pagerank.add_edge."""
    records = 0
    edges = 0
    for fields in _records(lines):
        records += 1
        if len(fields) != FIELD_COUNT:
            continue
        pagerank.add_edge(fields[SOURCE_FIELD], fields[TARGET_FIELD])
        edges += 1
    return IngestStats(records=records, edges=edges, skipped=records - edges)


def ingest_file(pagerank: Pagerank[str], path: Path) -> IngestStats:
    with path.open(encoding="utf-8") as f:
        return ingest_lines(pagerank, f)
