import heapq
import logging
from dataclasses import dataclass, field

from advisor.models.catalog import Catalog

logger = logging.getLogger(__name__)


@dataclass
class PrereqGraph:
    adjacency: dict[str, list[str]]  # prereq -> dependents
    in_degree: dict[str, int]  # course -> in-catalog prereq edges


@dataclass
class SequenceResult:
    order: list[str]
    complete: bool
    blocked: list[str] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)


def build_graph(catalog: Catalog) -> PrereqGraph:
    adjacency: dict[str, list[str]] = {code: [] for code in catalog.codes()}
    in_degree: dict[str, int] = {code: 0 for code in catalog.codes()}

    for course in catalog:
        for req in course.prereqs:
            # prereqs outside the catalog are informational only
            if req not in catalog:
                continue
            adjacency[req].append(course.code)
            in_degree[course.code] += 1

    return PrereqGraph(adjacency=adjacency, in_degree=in_degree)


def order_courses(graph: PrereqGraph) -> SequenceResult:
    """Kahn's algorithm, always taking the smallest ready code next.

    An incomplete result keeps the partial order and lists the courses that
    could never become ready.
    """
    indegree = dict(graph.in_degree)
    ready = [code for code, degree in indegree.items() if degree == 0]
    heapq.heapify(ready)
    order: list[str] = []

    while ready:
        node = heapq.heappop(ready)
        order.append(node)
        for nxt in graph.adjacency.get(node, []):
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                heapq.heappush(ready, nxt)

    if len(order) == len(indegree):
        return SequenceResult(order=order, complete=True)

    placed = set(order)
    blocked = sorted(code for code in indegree if code not in placed)
    cycles = find_cycles(graph, blocked)
    logger.warning(
        "Circular prerequisites: %d of %d courses cannot be ordered (cycles: %s)",
        len(blocked),
        len(indegree),
        cycles,
    )
    return SequenceResult(order=order, complete=False, blocked=blocked, cycles=cycles)


def find_cycles(graph: PrereqGraph, nodes: list[str]) -> list[list[str]]:
    """Strongly connected groups among ``nodes`` that actually loop.

    Each group is sorted, and groups are sorted by their first code. A course
    that only depends on a loop is not part of any group.
    """
    members = set(nodes)
    edges = {
        node: sorted({nxt for nxt in graph.adjacency.get(node, []) if nxt in members})
        for node in sorted(members)
    }

    # iterative Tarjan
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    stack: list[str] = []
    on_stack: set[str] = set()
    groups: list[list[str]] = []
    counter = 0

    for root in edges:
        if root in index:
            continue
        work = [(root, 0)]
        while work:
            node, pos = work[-1]
            if pos == 0:
                index[node] = lowlink[node] = counter
                counter += 1
                stack.append(node)
                on_stack.add(node)
            if pos < len(edges[node]):
                work[-1] = (node, pos + 1)
                nxt = edges[node][pos]
                if nxt not in index:
                    work.append((nxt, 0))
                elif nxt in on_stack:
                    lowlink[node] = min(lowlink[node], index[nxt])
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[node])
            if lowlink[node] == index[node]:
                group = []
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    group.append(member)
                    if member == node:
                        break
                if len(group) > 1 or node in edges[node]:
                    groups.append(sorted(group))

    return sorted(groups)
