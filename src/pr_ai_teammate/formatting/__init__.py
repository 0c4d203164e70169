"""
Review Formatter

This module provides formatting of synthesized reviews into
GitHub pull request review payloads.
"""

from .github import GitHubReviewFormatter

__all__ = ['GitHubReviewFormatter']
