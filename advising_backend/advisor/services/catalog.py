from dataclasses import dataclass

from advisor.models.catalog import Catalog, Course
from advisor.services.graph import build_graph, order_courses
from advisor.services.normalize import normalize_code


@dataclass
class PrereqRef:
    code: str
    title: str | None  # None when the code is not in the catalog


@dataclass
class CourseDetail:
    course: Course
    prereqs: list[PrereqRef]


@dataclass
class RecommendedOrder:
    courses: list[Course]
    complete: bool
    blocked: list[str]
    cycles: list[list[str]]


def list_sorted(catalog: Catalog) -> list[Course]:
    return [catalog.courses[code] for code in sorted(catalog.codes())]


def lookup(catalog: Catalog, raw_query: str) -> Course | None:
    code = normalize_code(raw_query)
    if not code:
        return None
    return catalog.get(code)


def course_detail(catalog: Catalog, raw_query: str) -> CourseDetail | None:
    course = lookup(catalog, raw_query)
    if course is None:
        return None
    refs = []
    for code in course.prereqs:
        found = catalog.get(code)
        refs.append(PrereqRef(code=code, title=found.title if found else None))
    return CourseDetail(course=course, prereqs=refs)


def recommended_order(catalog: Catalog) -> RecommendedOrder:
    result = order_courses(build_graph(catalog))
    return RecommendedOrder(
        courses=[catalog.courses[code] for code in result.order],
        complete=result.complete,
        blocked=result.blocked,
        cycles=result.cycles,
    )
