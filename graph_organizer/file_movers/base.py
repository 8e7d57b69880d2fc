from typing import Protocol

from graph_organizer.domain.plan import MoveReport, OrganizationPlan


class FileMover(Protocol):
    """Protocol for applying organization plans to the vault."""

    def move(self, plan: OrganizationPlan) -> MoveReport:
        """Move every planned note into its folder and report the outcome."""
        ...
