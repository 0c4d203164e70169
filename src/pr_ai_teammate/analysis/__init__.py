"""
Static Analysis

This module provides syntax-aware analysis of full changed-file
contents, with one pluggable analyzer per source language.
"""

from .base import LanguageAnalyzer, PerFileAnalysisError
from .python import PythonAnalyzer
from .static import StaticAnalyzer, create_default_analyzer

__all__ = [
    'LanguageAnalyzer',
    'PerFileAnalysisError',
    'PythonAnalyzer',
    'StaticAnalyzer',
    'create_default_analyzer',
]
