"""Greedy hub-and-spoke grouping of linked notes."""

from .link_graph import LinkGraph

# Any node with at least this many recorded links may start a group.
HUB_MIN_DEGREE = 1


def rank_identities(graph: LinkGraph) -> list[str]:
    """Order identities by descending degree, ties broken by identity ascending."""
    return sorted(graph.identities(), key=lambda identity: (-graph.degree_of(identity), identity))


def group_notes(graph: LinkGraph) -> dict[str, list[str]]:
    """Partition the link graph into folder-sized groups.

    Pass 1 walks the ranked identities and grows a group from every unprocessed
    hub by absorbing all of its unprocessed direct connections. A hub that
    absorbs nothing is released for pass 2.

    Pass 2 assigns each remaining identity to the group holding most of its
    direct connections, the earliest group winning ties. An identity with links
    but no connected group starts its own singleton group. Identities without
    links are never assigned.

    Args:
        graph: Completed link graph

    Returns:
        Dictionary mapping each group leader to its members, leader first,
        in group creation order
    """
    ranked = rank_identities(graph)
    position = {identity: index for index, identity in enumerate(ranked)}
    groups: dict[str, list[str]] = {}
    processed: set[str] = set()

    for identity in ranked:
        if identity in processed or graph.degree_of(identity) < HUB_MIN_DEGREE:
            continue

        group = [identity]
        processed.add(identity)

        for connected in sorted(graph.connections_of(identity), key=position.__getitem__):
            if connected not in processed:
                group.append(connected)
                processed.add(connected)

        if len(group) >= 2:
            groups[identity] = group
        else:
            processed.discard(identity)

    for identity in ranked:
        if identity in processed:
            continue

        best_leader = _best_connected_group(graph, identity, groups)
        if best_leader is not None:
            groups[best_leader].append(identity)
            processed.add(identity)
        elif graph.degree_of(identity) > 0:
            groups[identity] = [identity]
            processed.add(identity)

    return groups


def _best_connected_group(
    graph: LinkGraph, identity: str, groups: dict[str, list[str]]
) -> str | None:
    """Find the leader of the group with most members directly connected to identity."""
    connections = graph.connections_of(identity)
    best_leader = None
    best_count = 0

    for leader, members in groups.items():
        count = sum(1 for member in members if member in connections)
        if count > best_count:
            best_leader = leader
            best_count = count

    return best_leader
