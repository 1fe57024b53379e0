from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping


@dataclass(frozen=True)
class Course:
    code: str  # normalized, never empty
    title: str
    prereqs: tuple[str, ...] = ()  # normalized, input order, duplicates kept


@dataclass(frozen=True)
class Catalog:
    """Read-only snapshot of loaded courses keyed by normalized code.

    A new load builds a new Catalog; an existing one is never mutated.
    """

    courses: Mapping[str, Course] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "courses", MappingProxyType(dict(self.courses)))

    @classmethod
    def from_courses(cls, courses: list[Course]) -> "Catalog":
        # later entries overwrite earlier ones with the same code
        return cls({course.code: course for course in courses})

    def get(self, code: str) -> Course | None:
        return self.courses.get(code)

    def codes(self) -> list[str]:
        return list(self.courses.keys())

    def __contains__(self, code: object) -> bool:
        return code in self.courses

    def __len__(self) -> int:
        return len(self.courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(self.courses.values())
