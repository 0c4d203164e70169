"""
Review Synthesis

This module provides the synthesizer that turns issues into a review
summary and ordered line comments.
"""

from .synthesizer import ReviewSynthesizer, generate_review, NO_ISSUES_SUMMARY, SUMMARY_HEADER

__all__ = ['ReviewSynthesizer', 'generate_review', 'NO_ISSUES_SUMMARY', 'SUMMARY_HEADER']
