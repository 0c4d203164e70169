"""
Diff Ingestion

This module provides unified diff parsing with new-file line tracking
and changed-file classification.
"""

from .classifier import classify_path
from .parser import UnifiedDiffParser, MalformedInputError, parse_unified_diff

__all__ = ['classify_path', 'UnifiedDiffParser', 'MalformedInputError', 'parse_unified_diff']
