from advisor.models.catalog import Catalog
from advisor.services.catalog import course_detail, list_sorted, recommended_order
from advisor.services.catalog_loader import LoadResult

NO_DATA = "No data loaded."
NOT_FOUND = "Course not found."
CYCLE_WARNING = "Warning: Circular dependency detected."


def format_load_result(result: LoadResult) -> str:
    if not result.ok:
        return "Failed to open file."
    lines = [f"Loaded {result.loaded} courses."]
    if result.skipped:
        lines.append(f"Skipped {len(result.skipped)} invalid line(s).")
    return "\n".join(lines)


def format_course_list(catalog: Catalog) -> str:
    if not len(catalog):
        return NO_DATA
    lines = ["Course List:"]
    lines += [f"{course.code}, {course.title}" for course in list_sorted(catalog)]
    return "\n".join(lines)


def format_course_detail(catalog: Catalog, raw_query: str) -> str:
    detail = course_detail(catalog, raw_query)
    if detail is None:
        return NOT_FOUND
    header = f"{detail.course.code}, {detail.course.title}"
    if not detail.prereqs:
        return f"{header}\nPrerequisites: None"
    names = [
        ref.code if ref.title is not None else f"{ref.code} (title unavailable)"
        for ref in detail.prereqs
    ]
    return f"{header}\nPrerequisites: {', '.join(names)}"


def format_recommended_order(catalog: Catalog) -> str:
    if not len(catalog):
        return NO_DATA
    result = recommended_order(catalog)
    lines = ["Recommended Course Order:"]
    for position, course in enumerate(result.courses, start=1):
        lines.append(f"{position}. {course.code} - {course.title}")
    if not result.complete:
        lines += ["", CYCLE_WARNING]
        lines.append(f"Cannot be scheduled: {', '.join(result.blocked)}")
        for cycle in result.cycles:
            lines.append(f"  Cycle: {' <-> '.join(cycle)}")
    return "\n".join(lines)
