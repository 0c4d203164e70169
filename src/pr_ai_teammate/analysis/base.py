"""
Language Analyzer Interface

A language analyzer parses the full content of one source file and reports
structural issues. Analyzers are selected by file extension.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from ..models.review import Issue


class PerFileAnalysisError(Exception):
    """Source file could not be parsed"""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to parse {path}: {reason}")
        self.path = path
        self.reason = reason


class LanguageAnalyzer(ABC):
    """Base class for per-language static analyzers."""

    language: str = ""
    extensions: Tuple[str, ...] = ()

    @abstractmethod
    def analyze(self, path: str, source: str) -> List[Issue]:
        """
        Analyze the full content of one file.

        Args:
            path: Repository-relative file path
            source: Full file content

        Returns:
            Issues found in the file

        Raises:
            PerFileAnalysisError: If the source cannot be parsed
        """
