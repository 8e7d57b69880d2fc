"""Assembling organization plans from grouped notes."""

from collections import Counter, defaultdict
from typing import Iterable, Literal, Sequence

from graph_organizer.domain.note import NoteEntry
from graph_organizer.domain.plan import OrganizationPlan, PlannedFolder
from graph_organizer.exceptions import FolderNameCollisionError

from .folder_names import synthesize_folder_name
from .grouping import group_notes
from .link_extractor import extract_links
from .link_graph import LinkGraph
from .observer import OrganizationObserver
from .resolution import ReferenceResolver

CollisionPolicy = Literal["suffix", "merge", "reject"]


def assemble_plan(groups: dict[str, list[str]]) -> OrganizationPlan:
    """Turn grouping engine output into an organization plan.

    Folder names are not made unique here; see resolve_folder_collisions.

    Args:
        groups: Dictionary mapping group leaders to members, in creation order

    Returns:
        OrganizationPlan with one folder per group
    """
    return OrganizationPlan(
        folders=[
            PlannedFolder(
                folder_name=synthesize_folder_name(leader),
                leader=leader,
                members=list(members),
            )
            for leader, members in groups.items()
        ]
    )


def build_organization_plan(
    corpus: Iterable[NoteEntry],
    resolver: ReferenceResolver,
    *,
    excluded_folders: Sequence[str] = (),
    target_folders: Sequence[str] = (),
    observer: OrganizationObserver | None = None,
) -> OrganizationPlan:
    """Run link extraction, graph building, grouping and plan assembly.

    Args:
        corpus: All notes of the vault with their raw references
        resolver: Resolver mapping (source identity, raw reference) to a target identity
        excluded_folders: Path prefixes whose notes are skipped
        target_folders: Path prefixes notes must match, empty for no restriction
        observer: Optional observer notified after each stage

    Returns:
        OrganizationPlan, empty when no links could be resolved
    """
    links = extract_links(
        corpus,
        resolver,
        excluded_folders=excluded_folders,
        target_folders=target_folders,
    )
    if observer:
        observer.on_links_extracted(links)

    graph = LinkGraph.from_links(links)
    if observer:
        observer.on_graph_built(graph)

    groups = group_notes(graph)
    if observer:
        observer.on_groups_formed(groups)

    plan = assemble_plan(groups)
    if observer:
        observer.on_plan_assembled(plan)

    return plan


def resolve_folder_collisions(
    plan: OrganizationPlan, policy: CollisionPolicy = "suffix"
) -> OrganizationPlan:
    """Make folder names unique according to a collision policy.

    Policies:
        suffix: later folders with a taken name get "_2", "_3", ... appended
        merge: members of later folders are appended to the first folder with that name
        reject: raise FolderNameCollisionError

    Args:
        plan: Plan whose folder names may collide
        policy: Collision policy to apply

    Returns:
        New plan with unique folder names
    """
    collisions = plan.collisions()
    if not collisions:
        return plan

    if policy == "reject":
        folder_name, leaders = next(iter(collisions.items()))
        raise FolderNameCollisionError(folder_name, leaders)

    if policy == "merge":
        merged: dict[str, PlannedFolder] = {}
        for folder in plan.folders:
            if folder.folder_name in merged:
                merged[folder.folder_name].members.extend(folder.members)
            else:
                merged[folder.folder_name] = folder.model_copy(deep=True)
        return OrganizationPlan(folders=list(merged.values()))

    if policy == "suffix":
        taken = {folder.folder_name for folder in plan.folders}
        seen: Counter[str] = Counter()
        suffixes: dict[str, int] = defaultdict(lambda: 1)
        folders = []
        for folder in plan.folders:
            seen[folder.folder_name] += 1
            if seen[folder.folder_name] == 1:
                folders.append(folder.model_copy(deep=True))
                continue

            candidate = folder.folder_name
            while candidate in taken:
                suffixes[folder.folder_name] += 1
                candidate = f"{folder.folder_name}_{suffixes[folder.folder_name]}"
            taken.add(candidate)
            folders.append(folder.model_copy(update={"folder_name": candidate}, deep=True))
        return OrganizationPlan(folders=folders)

    raise ValueError(f"Unknown folder collision policy: {policy}")
