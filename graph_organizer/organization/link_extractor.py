"""Extraction of note-to-note links from the vault corpus."""

from typing import Iterable, Sequence

from graph_organizer.domain.links import LinkRecord
from graph_organizer.domain.note import NoteEntry

from .resolution import ReferenceResolver


def is_included(
    identity: str,
    excluded_folders: Sequence[str] = (),
    target_folders: Sequence[str] = (),
) -> bool:
    """Check whether a note takes part in organization.

    Both checks are plain string prefix tests, so "Archive" also excludes
    "Archived/Note.md".

    Args:
        identity: Note identity to check
        excluded_folders: Path prefixes whose notes are skipped
        target_folders: Path prefixes notes must match, empty for no restriction

    Returns:
        True if the note should be considered
    """
    if any(identity.startswith(prefix) for prefix in excluded_folders):
        return False
    if target_folders and not any(identity.startswith(prefix) for prefix in target_folders):
        return False
    return True


def extract_links(
    corpus: Iterable[NoteEntry],
    resolver: ReferenceResolver,
    *,
    excluded_folders: Sequence[str] = (),
    target_folders: Sequence[str] = (),
) -> list[LinkRecord]:
    """Resolve raw note references into unique note-to-note links.

    References are dropped when the resolver cannot resolve them, when they
    resolve to something that is not a note in the corpus (attachments, missing
    notes), or when either end is filtered out by the folder settings.

    Args:
        corpus: All notes of the vault with their raw references
        resolver: Resolver mapping (source identity, raw reference) to a target identity
        excluded_folders: Path prefixes whose notes are skipped
        target_folders: Path prefixes notes must match, empty for no restriction

    Returns:
        Links in corpus order then reference order, without duplicates
    """
    notes = list(corpus)
    note_identities = {note.identity for note in notes}

    links: list[LinkRecord] = []
    seen: set[LinkRecord] = set()

    for note in notes:
        if not is_included(note.identity, excluded_folders, target_folders):
            continue

        for reference in note.references:
            target = resolver.resolve(note.identity, reference)
            if target is None or target not in note_identities:
                continue
            if not is_included(target, excluded_folders, target_folders):
                continue

            link = LinkRecord(source=note.identity, target=target)
            if link not in seen:
                seen.add(link)
                links.append(link)

    return links
