"""
Data Models

PR AI Teammate 분석 파이프라인의 핵심 데이터 모델들
"""

from .diff import FileType, AddedLine, FileChange
from .review import (
    Severity,
    Issue,
    ReviewComment,
    ReviewResult,
    IssueRecord,
    GitHubCommentRequest,
    GitHubReviewRequest,
)

__all__ = [
    "FileType",
    "AddedLine",
    "FileChange",
    "Severity",
    "Issue",
    "ReviewComment",
    "ReviewResult",
    "IssueRecord",
    "GitHubCommentRequest",
    "GitHubReviewRequest",
]
