"""
Unified Diff Parser

Parses unified diff text (as produced by ``git diff``) into per-file change
records. Only new-file line numbers are tracked: each added line is recorded
with the line number it will have once the change is applied.
"""

import logging
from typing import List, Optional

from ..models.diff import AddedLine, FileChange
from .classifier import classify_path


logger = logging.getLogger(__name__)


FILE_HEADER_PREFIX = 'diff --git '
HUNK_HEADER_PREFIX = '@@'
NO_NEWLINE_MARKER = '\\'


class MalformedInputError(ValueError):
    """Diff text that cannot be parsed"""
    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(message)
        self.line = line


class _FileSection:
    """Mutable accumulator for the file section being scanned."""

    def __init__(self, path: str):
        self.path = path
        self.lines: List[str] = []
        self.added_lines: List[AddedLine] = []
        # 0 until the first hunk header of the section
        self.new_line = 0
        self.in_hunk = False

    def build(self) -> FileChange:
        return FileChange(
            path=self.path,
            file_type=classify_path(self.path),
            added_lines=tuple(self.added_lines),
            raw='\n'.join(self.lines),
        )


class UnifiedDiffParser:
    """
    Parser for unified diff text.

    Scans the input once, line by line. A ``diff --git`` header starts a new
    file section, ``@@`` hunk headers reset the new-file line counter, and
    ``+`` lines are recorded against that counter.
    """

    def parse(self, text: str) -> List[FileChange]:
        """
        Parse unified diff text into file changes.

        Args:
            text: Raw unified diff

        Returns:
            FileChange records in the order their sections appear

        Raises:
            MalformedInputError: If a file or hunk header cannot be parsed
        """
        if not text:
            return []

        lines = text.split('\n')
        if lines[-1] == '':
            lines.pop()

        files: List[FileChange] = []
        current: Optional[_FileSection] = None

        for line in lines:
            line = line.rstrip('\r')

            if line.startswith(FILE_HEADER_PREFIX):
                if current is not None:
                    files.append(self._flush(current))
                current = _FileSection(self.parse_file_header(line))

            if current is None:
                continue

            current.lines.append(line)
            self._consume_line(current, line)

        if current is not None:
            files.append(self._flush(current))

        logger.info(f"Parsed diff: {len(files)} files, "
                    f"{sum(f.added_count for f in files)} added lines")
        return files

    def _consume_line(self, section: _FileSection, line: str) -> None:
        """Advance the section's line accounting by one physical line."""
        if line.startswith(HUNK_HEADER_PREFIX):
            section.new_line = self.parse_hunk_header(line)
            section.in_hunk = True
            return

        if not section.in_hunk:
            # index/mode lines and the ---/+++ headers
            return

        if line.startswith('+') and not line.startswith('+++'):
            if section.new_line <= 0:
                raise MalformedInputError(f"Added line outside of a hunk range: {line}", line=line)
            section.added_lines.append(AddedLine(section.new_line, line[1:]))
            section.new_line += 1
            return

        if line.startswith('-') and not line.startswith('---'):
            return

        if not line.startswith(NO_NEWLINE_MARKER):
            section.new_line += 1

    def _flush(self, section: _FileSection) -> FileChange:
        file_change = section.build()
        logger.debug(f"Parsed file section {file_change.path} "
                     f"({file_change.file_type.value}): {file_change.added_count} added lines")
        return file_change

    def parse_file_header(self, line: str) -> str:
        """
        Extract the new-file path from a ``diff --git a/<p> b/<p>`` header.

        Args:
            line: File section header line

        Returns:
            Path with the ``b/`` prefix removed

        Raises:
            MalformedInputError: If the header does not have four tokens
        """
        parts = line.split()
        if len(parts) < 4:
            raise MalformedInputError(f"Invalid diff header: {line}", line=line)

        if len(parts) == 4:
            target = parts[3]
        else:
            # Unquoted paths containing spaces: "a/<p> b/<p>" splits at its midpoint
            rest = line[len(FILE_HEADER_PREFIX):]
            middle = len(rest) // 2
            if len(rest) % 2 == 1 and rest[middle] == ' ' and rest[middle + 1:].startswith('b/'):
                target = rest[middle + 1:]
            elif ' b/' in rest:
                # Renamed paths differ in length
                target = 'b/' + rest.rsplit(' b/', 1)[1]
            else:
                raise MalformedInputError(f"Invalid diff header: {line}", line=line)

        path = target[2:] if target.startswith('b/') else target
        if not path.strip():
            raise MalformedInputError(f"Invalid diff path: {line}", line=line)
        return path

    def parse_hunk_header(self, line: str) -> int:
        """
        Read the new-file start line from a hunk header.

        ``@@ -10,7 +12,9 @@ def foo():`` yields 12. The old-file range is
        ignored.

        Args:
            line: Hunk header line

        Returns:
            New-file start line

        Raises:
            MalformedInputError: If no ``+start[,count]`` range is present
        """
        for part in line.split():
            if not part.startswith('+'):
                continue
            start = part[1:].split(',', 1)[0]
            if not (start.isascii() and start.isdigit()):
                raise MalformedInputError(f"Invalid hunk header: {line}", line=line)
            return int(start)

        raise MalformedInputError(f"Invalid hunk header: {line}", line=line)


def parse_unified_diff(text: str) -> List[FileChange]:
    """Parse unified diff text with a fresh parser."""
    return UnifiedDiffParser().parse(text)
