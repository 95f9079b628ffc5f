"""Counting paths through a cave system."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

_LOWERCASE = frozenset("abcdefghijklmnopqrstuvwxyz")


class NodeKind(Enum):
    START = auto()
    END = auto()
    SMALL = auto()
    BIG = auto()


@dataclass(frozen=True)
class Node:
    kind: NodeKind
    name: str


START = Node(NodeKind.START, "start")
END = Node(NodeKind.END, "end")


def parse_node(name: str) -> Node:
    """Classify a cave by its name."""
    if name == "start":
        return START
    if name == "end":
        return END
    if all(char in _LOWERCASE for char in name):
        return Node(NodeKind.SMALL, name)
    return Node(NodeKind.BIG, name)


@dataclass
class CaveGraph:
    """Undirected cave connections, in the order they were listed."""

    edgelists: dict[Node, list[Node]] = field(default_factory=dict)

    def neighbours(self, node: Node) -> list[Node]:
        """Return the caves connected to node."""
        return self.edgelists[node]

    def find_all_paths(self, revisits: int) -> list[list[Node]]:
        """Return every start-to-end path, allowing revisits of small caves."""
        return list(self._paths([START], frozenset({START}), revisits))

    def _paths(
        self, path: list[Node], visited_small: frozenset[Node], revisits: int
    ) -> Iterator[list[Node]]:
        for neighbour in self.neighbours(path[-1]):
            if neighbour.kind is NodeKind.BIG:
                yield from self._paths(path + [neighbour], visited_small, revisits)
            elif neighbour.kind is NodeKind.SMALL:
                seen = neighbour in visited_small
                if not seen or revisits > 0:
                    yield from self._paths(
                        path + [neighbour],
                        visited_small | {neighbour},
                        revisits - 1 if seen else revisits,
                    )
            elif neighbour.kind is NodeKind.END:
                yield path + [neighbour]


def parse_input(text: str) -> CaveGraph:
    """Parse one "a-b" connection per line."""
    graph = CaveGraph()
    for line in text.split("\n"):
        first, sep, second = line.partition("-")
        if not sep:
            raise ValueError(f"Failed to parse line: {line!r}")
        a, b = parse_node(first), parse_node(second)
        graph.edgelists.setdefault(a, []).append(b)
        graph.edgelists.setdefault(b, []).append(a)
    return graph


def part_one(graph: CaveGraph) -> int:
    """Count paths visiting small caves at most once."""
    return len(graph.find_all_paths(0))


def part_two(graph: CaveGraph) -> int:
    """Count paths where one small cave may be visited twice."""
    return len(graph.find_all_paths(1))