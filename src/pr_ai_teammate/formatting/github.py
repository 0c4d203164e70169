"""
GitHub Review Formatter

Converts a synthesized review into the payload a GitHub client posts as a
pull request review, and issues into records for archiving.
"""

import logging
from typing import Iterable, List, Optional

from ..models.review import (
    Issue,
    IssueRecord,
    ReviewResult,
    GitHubCommentRequest,
    GitHubReviewRequest,
)


logger = logging.getLogger(__name__)


class GitHubReviewFormatter:
    """
    Formats reviews for the GitHub pull request review API.

    Comments are anchored to the new side of the diff (``RIGHT``), since
    review line numbers are new-file line numbers.
    """

    def __init__(self, side: str = 'RIGHT', event: str = 'COMMENT'):
        """
        Initialize GitHub review formatter.

        Args:
            side: Diff side comments attach to
            event: Review event to submit
        """
        self.side = side
        self.event = event

    def build_review(
        self,
        result: ReviewResult,
        commit_id: str,
        extra_summary: Optional[str] = None,
    ) -> GitHubReviewRequest:
        """
        Build a review request from a review result.

        Args:
            result: Synthesized review
            commit_id: Head commit SHA the review applies to
            extra_summary: Additional summary text (e.g. from an AI reviewer),
                appended after a blank line when non-blank

        Returns:
            Validated GitHubReviewRequest
        """
        body = result.summary
        if extra_summary and extra_summary.strip():
            body = f"{body}\n\n{extra_summary}"

        comments = [
            GitHubCommentRequest(path=c.path, line=c.line, body=c.body, side=self.side)
            for c in result.comments
        ]

        logger.debug(f"Built GitHub review for {commit_id} with {len(comments)} comments")
        return GitHubReviewRequest(
            commit_id=commit_id,
            body=body,
            event=self.event,
            comments=comments,
        )

    def build_issue_records(self, issues: Iterable[Issue]) -> List[IssueRecord]:
        """Convert issues into archive records, keeping their order."""
        return [IssueRecord.from_issue(issue) for issue in issues]
