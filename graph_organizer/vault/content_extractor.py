"""Reference extraction from markdown note content."""

import re
from typing import List
from urllib.parse import unquote

# [[target]], [[target|alias]], [[target#heading]] and the embed form ![[target]]
WIKILINK_PATTERN = re.compile(r"!?\[\[([^\]|#^]*)(?:[#^][^\]|]*)?(?:\|[^\]]*)?\]\]")
# [text](path) and ![alt](path), allowing one level of parentheses in the path
MARKDOWN_LINK_PATTERN = re.compile(r"!?\[[^\]]*\]\(([^\(\)]*(?:\([^\(\)]*\)[^\(\)]*)*)\)")
# Optional link title: [text](path "Title") or [text](path 'Title')
LINK_TITLE_PATTERN = re.compile(r"""\s+(?:"[^"]*"|'[^']*')$""")
CODE_BLOCK_PATTERN = re.compile(r"```.*?```|`[^`\n]*`", re.DOTALL)


class ContentExtractor:
    """Service for extracting outgoing references from markdown text."""

    @staticmethod
    def extract_wikilinks(content: str) -> List[str]:
        """Extract Obsidian wikilink targets, embeds included.

        Headings and block references are stripped, so [[Note#Section]] yields "Note".
        Links to a heading of the same note ([[#Section]]) are skipped.

        Args:
            content: Markdown content to extract wikilinks from

        Returns:
            List of wikilink targets
        """
        targets = []
        for match in WIKILINK_PATTERN.finditer(content):
            target = match.group(1).strip()
            if target:
                targets.append(target)
        return targets

    @staticmethod
    def extract_markdown_links(content: str) -> List[str]:
        """Extract local paths from markdown links and images.

        External URLs and same-note anchors are skipped. Paths are URL decoded
        and stripped of any title or trailing anchor.

        Args:
            content: Markdown content to extract links from

        Returns:
            List of local link paths
        """
        paths = []
        for match in MARKDOWN_LINK_PATTERN.finditer(content):
            path = LINK_TITLE_PATTERN.sub("", match.group(1).strip())
            if path.startswith("<") and path.endswith(">"):
                path = path[1:-1]
            if not path or path.startswith(("#", "http://", "https://", "mailto:")):
                continue

            path = unquote(path.split("#", 1)[0])
            if path:
                paths.append(path)
        return paths

    def extract_references(self, content: str) -> List[str]:
        """Extract all outgoing references of a note.

        Code spans and fenced code blocks are ignored.

        Args:
            content: Markdown content of the note

        Returns:
            List of raw references, wikilinks first, then markdown links
        """
        content = CODE_BLOCK_PATTERN.sub("", content)
        return self.extract_wikilinks(content) + self.extract_markdown_links(content)
