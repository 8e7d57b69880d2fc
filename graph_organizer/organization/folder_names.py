"""Folder name synthesis from group leaders."""

import re

UNSAFE_CHARACTERS = re.compile(r'[<>:"/\\|?*]')
FALLBACK_FOLDER_NAME = "Untitled"


def synthesize_folder_name(leader: str) -> str:
    """Derive a filesystem-safe folder name from a group leader identity.

    Args:
        leader: Identity of the group leader (e.g. "Notes/My:Note?.md")

    Returns:
        Folder name built from the leader's file name without extension
        (e.g. "My_Note_")
    """
    name = leader.rsplit("/", 1)[-1]
    if "." in name:
        name = name[: name.rindex(".")]

    name = UNSAFE_CHARACTERS.sub("_", name)
    name = re.sub(r"\s+", "_", name)
    name = re.sub(r"_+", "_", name)
    name = name.strip()

    return name or FALLBACK_FOLDER_NAME
