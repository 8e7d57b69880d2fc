"""Vault entry domain models."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class NoteEntry(BaseModel):
    """Represents a single note in the vault.

    Attributes:
        identity: Vault-relative POSIX path of the note (e.g. "Projects/Alpha.md")
        folder: Vault-relative path of the containing folder, "" for the vault root
        references: Raw outgoing references in the order they appear in the note
    """

    kind: Literal["note"] = "note"
    identity: str
    folder: str = ""
    references: list[str] = []

    @property
    def name(self) -> str:
        return self.identity.rsplit("/", 1)[-1]


class FolderEntry(BaseModel):
    """Represents a folder in the vault."""

    kind: Literal["folder"] = "folder"
    identity: str


VaultEntry = Annotated[Union[NoteEntry, FolderEntry], Field(discriminator="kind")]


class VaultSnapshot(BaseModel):
    """A point-in-time view of the vault contents.

    Attributes:
        notes: Markdown notes, sorted by identity
        folders: Folders, sorted by identity
        attachments: Vault-relative paths of non-note files (images, PDFs, drawings)
    """

    notes: list[NoteEntry] = []
    folders: list[FolderEntry] = []
    attachments: list[str] = []

    @classmethod
    def from_entries(
        cls, entries: list[VaultEntry], attachments: list[str] | None = None
    ) -> "VaultSnapshot":
        notes = [entry for entry in entries if isinstance(entry, NoteEntry)]
        folders = [entry for entry in entries if isinstance(entry, FolderEntry)]
        return cls(
            notes=sorted(notes, key=lambda n: n.identity),
            folders=sorted(folders, key=lambda f: f.identity),
            attachments=sorted(attachments or []),
        )

    def note_identities(self) -> set[str]:
        return {note.identity for note in self.notes}

    def get_note(self, identity: str) -> NoteEntry | None:
        for note in self.notes:
            if note.identity == identity:
                return note
        return None
