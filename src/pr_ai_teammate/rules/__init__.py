"""
Rule Engine

This module provides the rule interface, the built-in diff rules
and the engine that applies them.
"""

from .base import Rule
from .builtin import TodoRule, SecretRule, LargeDiffRule
from .engine import RuleEngine, create_default_rules, create_default_engine

__all__ = [
    'Rule',
    'TodoRule',
    'SecretRule',
    'LargeDiffRule',
    'RuleEngine',
    'create_default_rules',
    'create_default_engine',
]
