"""
Built-in Rules

Lightweight line-pattern rules applied to the added lines of every file.
"""

from typing import List, Sequence

from ..models.diff import FileChange, FileType
from ..models.review import Issue, Severity
from .base import Rule


DEFAULT_TODO_MARKERS = ("TODO", "FIXME")
DEFAULT_SECRET_MARKERS = ("password", "secret", "api_key")
DEFAULT_LARGE_DIFF_THRESHOLD = 200


class TodoRule(Rule):
    """Flags TODO/FIXME markers added to production code."""

    rule_id = "todo"
    description = "Flags TODO/FIXME markers in production code."

    def __init__(self, markers: Sequence[str] = DEFAULT_TODO_MARKERS):
        self.markers = tuple(markers)

    def check(self, file_change: FileChange) -> List[Issue]:
        if file_change.file_type is not FileType.PRODUCTION:
            return []

        return [
            self.issue(
                file_change,
                line.line_number,
                Severity.MEDIUM,
                "TODO/FIXME marker added to production code.",
            )
            for line in file_change.added_lines
            if any(marker in line.content for marker in self.markers)
        ]


class SecretRule(Rule):
    """Flags added lines that look like they carry credentials."""

    rule_id = "secrets"
    description = "Flags potential secrets in added lines."

    def __init__(self, markers: Sequence[str] = DEFAULT_SECRET_MARKERS):
        self.markers = tuple(marker.lower() for marker in markers)

    def check(self, file_change: FileChange) -> List[Issue]:
        issues = []
        for line in file_change.added_lines:
            lower = line.content.lower()
            if any(marker in lower for marker in self.markers):
                issues.append(self.issue(
                    file_change,
                    line.line_number,
                    Severity.HIGH,
                    "Possible secret detected in added line.",
                ))
        return issues


class LargeDiffRule(Rule):
    """
    Flags files with more added lines than ``threshold``.

    The issue is file-scoped (line 0). A threshold of zero or less disables
    the rule.
    """

    rule_id = "large-diff"
    description = "Flags files with a large number of added lines."

    def __init__(self, threshold: int = DEFAULT_LARGE_DIFF_THRESHOLD):
        self.threshold = threshold

    @property
    def enabled(self) -> bool:
        return self.threshold > 0

    def check(self, file_change: FileChange) -> List[Issue]:
        if not self.enabled or file_change.added_count <= self.threshold:
            return []

        return [self.issue(
            file_change,
            0,
            Severity.LOW,
            "Large diff detected; consider splitting into smaller changes.",
        )]
