import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from advisor.models.catalog import Catalog, Course
from advisor.services.normalize import normalize_code, strip_bom

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    LOADED = "loaded"
    EMPTY = "empty"
    SOURCE_UNAVAILABLE = "source_unavailable"


@dataclass
class SkippedRecord:
    line_number: int
    reason: str
    text: str


@dataclass
class LoadResult:
    status: LoadStatus
    catalog: Catalog | None = None
    skipped: list[SkippedRecord] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != LoadStatus.SOURCE_UNAVAILABLE

    @property
    def loaded(self) -> int:
        return len(self.catalog) if self.catalog is not None else 0


def parse_line(line: str) -> list[str]:
    """Split one ``code,title[,prereq]*`` record into trimmed fields."""
    return [strip_bom(value).strip() for value in line.split(",")]


def _is_ignorable(line: str) -> bool:
    check = strip_bom(line).strip()
    return not check or check.startswith("#")


def load_records(lines: Iterable[str]) -> LoadResult:
    courses: dict[str, Course] = {}
    skipped: list[SkippedRecord] = []

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if _is_ignorable(line):
            continue
        fields = parse_line(line)
        if len(fields) < 2:
            skipped.append(SkippedRecord(line_number, "malformed", line))
            continue

        code = normalize_code(fields[0])
        if not code:
            skipped.append(SkippedRecord(line_number, "empty code", line))
            continue

        prereqs = tuple(p for p in (normalize_code(f) for f in fields[2:]) if p)
        if code in courses:
            logger.debug("Line %d redefines %s; keeping the later entry", line_number, code)
        courses[code] = Course(code=code, title=fields[1], prereqs=prereqs)

    for item in skipped:
        logger.warning("Skipped line %d (%s): %r", item.line_number, item.reason, item.text)

    catalog = Catalog(courses)
    status = LoadStatus.LOADED if courses else LoadStatus.EMPTY
    logger.info("Loaded %d courses, skipped %d line(s)", len(catalog), len(skipped))
    return LoadResult(status=status, catalog=catalog, skipped=skipped)


def load_text(content: str) -> LoadResult:
    return load_records(content.split("\n"))


def load_file(path: str | Path, encoding: str = "utf-8-sig") -> LoadResult:
    """Load a catalog file.

    An unreadable source yields ``SOURCE_UNAVAILABLE`` with no catalog, so
    the caller keeps whatever it had before.
    """
    try:
        content = Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read catalog %s: %s", path, exc)
        return LoadResult(status=LoadStatus.SOURCE_UNAVAILABLE, error=str(exc))
    return load_text(content)
