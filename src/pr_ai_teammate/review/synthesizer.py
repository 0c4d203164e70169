"""
Review Synthesizer

Merges rule and analyzer issues into a review: a severity summary and
inline comments ordered by file and line.
"""

import logging
from collections import Counter
from typing import Iterable, List

from ..models.review import Issue, ReviewComment, ReviewResult, Severity


logger = logging.getLogger(__name__)


NO_ISSUES_SUMMARY = "✅ No issues detected by automated checks."
SUMMARY_HEADER = "## Automated Review Summary"


class ReviewSynthesizer:
    """
    Builds a ReviewResult from issues.

    The summary lists severities in High, Medium, Low order and omits
    severities with no issues. File-scoped issues (line 0) are counted in
    the summary but never become comments. Comments at the same path and
    line are all kept, in input order.
    """

    def generate(self, issues: Iterable[Issue]) -> ReviewResult:
        """
        Generate a review from issues.

        Args:
            issues: Issues in discovery order

        Returns:
            ReviewResult with summary and sorted comments
        """
        issues = list(issues)
        if not issues:
            return ReviewResult(summary=NO_ISSUES_SUMMARY, comments=[])

        summary = self.build_summary(issues)
        comments = self.build_comments(issues)

        logger.info(f"Synthesized review: {len(issues)} issues, {len(comments)} comments")
        return ReviewResult(summary=summary, comments=comments)

    def build_summary(self, issues: List[Issue]) -> str:
        counts = Counter(issue.severity for issue in issues)
        parts = [
            f"{severity.label}: {counts[severity]}"
            for severity in Severity.ordered()
            if counts[severity] > 0
        ]
        return f"{SUMMARY_HEADER}\n\nIssues detected: {', '.join(parts)}"

    def build_comments(self, issues: List[Issue]) -> List[ReviewComment]:
        comments = [
            ReviewComment(
                path=issue.file_path,
                line=issue.line,
                body=f"**{issue.rule_id}**: {issue.message}",
            )
            for issue in issues
            if issue.file_path and not issue.is_file_scoped
        ]
        # sorted() is stable, so equal (path, line) keys keep input order
        return sorted(comments, key=lambda c: (c.path, c.line))


def generate_review(issues: Iterable[Issue]) -> ReviewResult:
    """Generate a review with a fresh synthesizer."""
    return ReviewSynthesizer().generate(issues)
