"""Scanning a vault folder into a snapshot of notes, folders and attachments."""

from pathlib import Path

from loguru import logger

from graph_organizer.domain.note import FolderEntry, NoteEntry, VaultEntry, VaultSnapshot

from .content_extractor import ContentExtractor


class VaultScanner:
    """Builds vault snapshots from a folder of markdown notes."""

    def __init__(self, vault_path: Path, content_extractor: ContentExtractor | None = None):
        """Initialize the scanner.

        Args:
            vault_path: Root folder of the vault
            content_extractor: Extractor used to find references in note content
        """
        self.vault_path = Path(vault_path)
        self.content_extractor = content_extractor or ContentExtractor()

    def scan(self) -> VaultSnapshot:
        """Read the vault and collect notes with their raw references.

        Hidden files and folders (.git, .obsidian, ...) are skipped. Excalidraw
        drawings stored as markdown are treated as attachments.

        Returns:
            VaultSnapshot of the current vault contents
        """
        if not self.vault_path.is_dir():
            raise FileNotFoundError(f"Vault folder not found: {self.vault_path}")

        entries: list[VaultEntry] = []
        attachments: list[str] = []

        for path in sorted(self.vault_path.rglob("*")):
            relative_path = path.relative_to(self.vault_path)
            if any(part.startswith(".") for part in relative_path.parts):
                continue

            identity = relative_path.as_posix()
            if path.is_dir():
                entries.append(FolderEntry(identity=identity))
            elif self._is_note(path):
                entries.append(self._read_note(path, relative_path))
            else:
                attachments.append(identity)

        snapshot = VaultSnapshot.from_entries(entries, attachments)
        logger.info(
            f"Scanned {self.vault_path}: {len(snapshot.notes)} notes, "
            f"{len(snapshot.folders)} folders, {len(snapshot.attachments)} attachments"
        )
        return snapshot

    def _read_note(self, path: Path, relative_path: Path) -> NoteEntry:
        logger.debug(f"Reading {relative_path}")
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            content = f.read()

        folder = relative_path.parent.as_posix() if relative_path.parent != Path(".") else ""
        return NoteEntry(
            identity=relative_path.as_posix(),
            folder=folder,
            references=self.content_extractor.extract_references(content),
        )

    @staticmethod
    def _is_note(path: Path) -> bool:
        return path.suffix.lower() == ".md" and not path.name.endswith(".excalidraw.md")
