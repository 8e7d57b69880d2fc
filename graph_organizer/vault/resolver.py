"""Resolution of raw note references to vault identities."""

import posixpath
from collections import defaultdict

from loguru import logger

from graph_organizer.domain.note import VaultSnapshot
from graph_organizer.organization.resolution import ReferenceResolver, ResolutionTable


class WikilinkResolver(ReferenceResolver):
    """Resolves wikilinks and markdown links the way Obsidian does."""

    def __init__(self, snapshot: VaultSnapshot):
        """Initialize resolver with a vault snapshot.

        Args:
            snapshot: Vault snapshot providing notes, their folders and attachments
        """
        self.snapshot = snapshot
        self._folders = {note.identity: note.folder for note in snapshot.notes}
        self._paths = {note.identity for note in snapshot.notes} | set(snapshot.attachments)
        self._paths_lower = {path.lower(): path for path in sorted(self._paths, reverse=True)}

        self._by_name: dict[str, list[str]] = defaultdict(list)
        for path in sorted(self._paths, key=lambda p: (len(p), p)):
            name = posixpath.basename(path).lower()
            self._by_name[name].append(path)
            stem, extension = posixpath.splitext(name)
            if extension == ".md":
                self._by_name[stem].append(path)

    def resolve(self, source: str, reference: str) -> str | None:
        """Resolve a single reference made from a source note.

        Priority:
        1. Exact vault path, then with an implicit .md extension
        2. Path relative to the source note's folder, same two forms
        3. Case-insensitive vault path
        4. File name or note stem anywhere in the vault, shortest path first

        Args:
            source: Identity of the note containing the reference
            reference: Raw reference as extracted from the note

        Returns:
            Resolved note or attachment identity, or None if not found
        """
        link = reference.strip().replace("\\", "/").lstrip("/")
        if not link:
            return None

        for candidate in self._candidates(source, link):
            if candidate in self._paths:
                return candidate

        for candidate in self._candidates(source, link):
            if candidate.lower() in self._paths_lower:
                return self._paths_lower[candidate.lower()]

        matches = self._by_name.get(posixpath.basename(link).lower())
        if matches and "/" not in link:
            return matches[0]
        if matches:
            # A partial path such as "Projects/Alpha" must match the end of the identity.
            suffix = link.lower()
            for path in matches:
                lowered = path.lower()
                if lowered.endswith(f"/{suffix}") or lowered.endswith(f"/{suffix}.md"):
                    return path

        logger.debug(f"Could not resolve reference '{reference}' from {source}")
        return None

    def resolution_table(self) -> ResolutionTable:
        """Resolve every reference of every note into a precomputed table."""
        table = ResolutionTable()
        for note in self.snapshot.notes:
            for reference in note.references:
                table.add(note.identity, reference, self.resolve(note.identity, reference))
        return table

    def _candidates(self, source: str, link: str) -> list[str]:
        folder = self._folders.get(source, "")
        relative = posixpath.normpath(posixpath.join(folder, link)) if folder else link
        candidates = [link, f"{link}.md"]
        if relative != link:
            candidates += [relative, f"{relative}.md"]
        return candidates
