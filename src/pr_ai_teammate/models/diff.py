"""
Diff Data Models

Unified diff 파싱 결과를 담는 데이터 모델들
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class FileType(str, Enum):
    """Classification of a changed file."""
    PRODUCTION = "production"
    TEST = "test"
    CONFIG = "config"


@dataclass(frozen=True)
class AddedLine:
    """A line added by the diff, numbered in the new file."""
    line_number: int
    content: str

    def __post_init__(self):
        """데이터 검증"""
        if self.line_number <= 0:
            raise ValueError("Line number must be positive")


@dataclass(frozen=True)
class FileChange:
    """파일 변경사항"""
    path: str
    file_type: FileType
    added_lines: Tuple[AddedLine, ...] = ()
    raw: str = field(default="", repr=False)

    def __post_init__(self):
        """데이터 검증"""
        if not self.path:
            raise ValueError("File path cannot be empty")
        # Accept any iterable of lines but always store a tuple
        object.__setattr__(self, "added_lines", tuple(self.added_lines))

    @property
    def extension(self) -> str:
        """소문자 확장자 반환 (예: '.py'), 없으면 빈 문자열"""
        name = self.path.rsplit("/", 1)[-1]
        if "." not in name:
            return ""
        return "." + name.rsplit(".", 1)[-1].lower()

    @property
    def added_count(self) -> int:
        """추가된 라인 수"""
        return len(self.added_lines)
