"""
Rule Interface

Every rule is a small strategy object: it has an id, a description and a
``check`` method that turns one FileChange into zero or more Issues.
Rules must not raise; a rule that does not apply returns an empty list.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.diff import FileChange
from ..models.review import Issue, Severity


class Rule(ABC):
    """Base class for diff rules."""

    rule_id: str = ""
    description: str = ""

    @abstractmethod
    def check(self, file_change: FileChange) -> List[Issue]:
        """
        Check one changed file.

        Args:
            file_change: Parsed and classified file change

        Returns:
            Issues found in the file (possibly empty)
        """

    def issue(self, file_change: FileChange, line: int, severity: Severity, message: str) -> Issue:
        """Build an issue attributed to this rule."""
        return Issue(
            file_path=file_change.path,
            line=line,
            rule_id=self.rule_id,
            severity=severity,
            message=message,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rule_id={self.rule_id!r})"
