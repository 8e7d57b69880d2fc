"""Optional progress reporting for the organization pipeline."""

from typing import Protocol

from loguru import logger

from graph_organizer.domain.links import LinkRecord
from graph_organizer.domain.plan import OrganizationPlan

from .link_graph import LinkGraph


class OrganizationObserver(Protocol):
    """Receives progress events from the organization pipeline."""

    def on_links_extracted(self, links: list[LinkRecord]) -> None: ...

    def on_graph_built(self, graph: LinkGraph) -> None: ...

    def on_groups_formed(self, groups: dict[str, list[str]]) -> None: ...

    def on_plan_assembled(self, plan: OrganizationPlan) -> None: ...


class LoguruObserver(OrganizationObserver):
    """Observer forwarding pipeline events to loguru."""

    def on_links_extracted(self, links: list[LinkRecord]) -> None:
        logger.debug(f"Extracted {len(links)} note-to-note links")

    def on_graph_built(self, graph: LinkGraph) -> None:
        logger.debug(f"Link graph has {len(graph)} nodes and {graph.link_count()} links")

    def on_groups_formed(self, groups: dict[str, list[str]]) -> None:
        for leader, members in groups.items():
            logger.debug(f"Group led by {leader}: {len(members)} notes")

    def on_plan_assembled(self, plan: OrganizationPlan) -> None:
        logger.info(
            f"Organization plan includes {len(plan.folders)} folders and {plan.note_count} notes"
        )
