"""Link graph analysis and grouping of notes into folders."""

from graph_organizer.organization.folder_names import synthesize_folder_name
from graph_organizer.organization.grouping import group_notes, rank_identities
from graph_organizer.organization.link_extractor import extract_links, is_included
from graph_organizer.organization.link_graph import LinkGraph
from graph_organizer.organization.observer import LoguruObserver, OrganizationObserver
from graph_organizer.organization.planner import (
    CollisionPolicy,
    assemble_plan,
    build_organization_plan,
    resolve_folder_collisions,
)
from graph_organizer.organization.resolution import ReferenceResolver, ResolutionTable

__all__ = [
    "CollisionPolicy",
    "LinkGraph",
    "LoguruObserver",
    "OrganizationObserver",
    "ReferenceResolver",
    "ResolutionTable",
    "assemble_plan",
    "build_organization_plan",
    "extract_links",
    "group_notes",
    "is_included",
    "rank_identities",
    "resolve_folder_collisions",
]
