"""
Review Data Models

코드 리뷰 관련 데이터 모델들
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, field_validator


class Severity(str, Enum):
    """Issue severity, declared in summary priority order."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def label(self) -> str:
        """요약에 쓰이는 표시 이름 (예: 'High')"""
        return self.value.capitalize()

    @classmethod
    def ordered(cls) -> List["Severity"]:
        """우선순위 순서 (High, Medium, Low)"""
        return [cls.HIGH, cls.MEDIUM, cls.LOW]


@dataclass(frozen=True)
class Issue:
    """룰 또는 분석기가 발견한 개별 이슈"""
    file_path: str
    line: int
    rule_id: str
    severity: Severity
    message: str

    def __post_init__(self):
        """데이터 검증"""
        if self.line < 0:
            raise ValueError("Line number must be non-negative")
        if not self.rule_id:
            raise ValueError("Rule id cannot be empty")
        object.__setattr__(self, "severity", Severity(self.severity))

    @property
    def is_file_scoped(self) -> bool:
        """라인에 붙일 수 없는 파일 단위 이슈인지 확인"""
        return self.line == 0


@dataclass(frozen=True)
class ReviewComment:
    """라인 단위 리뷰 코멘트"""
    path: str
    line: int
    body: str

    def __post_init__(self):
        """데이터 검증"""
        if self.line <= 0:
            raise ValueError("Line number must be positive")


@dataclass
class ReviewResult:
    """전체 리뷰 결과"""
    summary: str
    comments: List[ReviewComment] = field(default_factory=list)

    @property
    def files_with_comments(self) -> List[str]:
        """코멘트가 있는 파일 목록 (정렬 순서 유지)"""
        seen = []
        for comment in self.comments:
            if comment.path not in seen:
                seen.append(comment.path)
        return seen


# Pydantic models for collaborator payloads
class IssueRecord(BaseModel):
    """저장소 보관용 Issue 모델"""
    file_path: str
    line: int
    rule_id: str
    severity: str
    message: str

    model_config = ConfigDict(frozen=True)

    @field_validator('line')
    @classmethod
    def validate_line(cls, v):
        if v < 0:
            raise ValueError('Line number must be non-negative')
        return v

    @field_validator('severity')
    @classmethod
    def validate_severity(cls, v):
        if v not in {s.value for s in Severity}:
            raise ValueError('Invalid severity')
        return v

    @classmethod
    def from_issue(cls, issue: Issue) -> "IssueRecord":
        return cls(
            file_path=issue.file_path,
            line=issue.line,
            rule_id=issue.rule_id,
            severity=issue.severity.value,
            message=issue.message,
        )


class GitHubCommentRequest(BaseModel):
    """GitHub 리뷰 인라인 코멘트 모델"""
    path: str
    line: int
    body: str
    side: str = 'RIGHT'

    @field_validator('side')
    @classmethod
    def validate_side(cls, v):
        if v not in {'RIGHT', 'LEFT'}:
            raise ValueError('Invalid side')
        return v

    @field_validator('line')
    @classmethod
    def validate_line(cls, v):
        if v <= 0:
            raise ValueError('Line number must be positive')
        return v

    @field_validator('body')
    @classmethod
    def validate_body(cls, v):
        if not v.strip():
            raise ValueError('Comment body cannot be empty')
        return v


class GitHubReviewRequest(BaseModel):
    """GitHub PR 리뷰 생성 요청 모델"""
    commit_id: str
    body: str
    event: str = 'COMMENT'
    comments: List[GitHubCommentRequest] = []

    @field_validator('commit_id')
    @classmethod
    def validate_commit_id(cls, v):
        if not v.strip():
            raise ValueError('Commit SHA is required')
        return v.strip()

    @field_validator('event')
    @classmethod
    def validate_event(cls, v):
        if v not in {'COMMENT', 'APPROVE', 'REQUEST_CHANGES'}:
            raise ValueError('Invalid review event')
        return v
