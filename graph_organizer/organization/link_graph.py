"""Bidirectional link graph keyed by note identity."""

from typing import Iterable, Iterator

from graph_organizer.domain.links import GraphNode, LinkRecord


class LinkGraph:
    """In-memory graph of note links.

    The graph is write-once per analysis pass: links can be added but never
    removed. Nodes are created on first reference, as source or as target.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, GraphNode] = {}

    @classmethod
    def from_links(cls, links: Iterable[LinkRecord]) -> "LinkGraph":
        graph = cls()
        for link in links:
            graph.add_link(link.source, link.target)
        return graph

    def add_link(self, source: str, target: str) -> None:
        """Record a directed link from source to target."""
        self._get_or_create(source).targets.add(target)
        self._get_or_create(target).sources.add(source)

    def node(self, identity: str) -> GraphNode | None:
        return self._nodes.get(identity)

    def degree_of(self, identity: str) -> int:
        """Get the number of recorded incoming plus outgoing links, 0 if unknown."""
        node = self._nodes.get(identity)
        return node.degree if node else 0

    def connections_of(self, identity: str) -> set[str]:
        node = self._nodes.get(identity)
        return node.connections if node else set()

    def identities(self) -> list[str]:
        return list(self._nodes)

    def link_count(self) -> int:
        return sum(len(node.targets) for node in self._nodes.values())

    def _get_or_create(self, identity: str) -> GraphNode:
        node = self._nodes.get(identity)
        if node is None:
            node = GraphNode(identity=identity)
            self._nodes[identity] = node
        return node

    def __contains__(self, identity: object) -> bool:
        return identity in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)
