"""
Rule Engine

Runs an ordered set of rules over every changed file.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import RulesConfig
from ..models.diff import FileChange
from ..models.review import Issue
from .base import Rule
from .builtin import TodoRule, SecretRule, LargeDiffRule


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Applies rules to file changes.

    Iteration is file-major, rule-minor: all rules run against the first
    file, then all rules against the second, and so on. The engine knows
    nothing about concrete rules; new rules only need to implement ``Rule``.
    """

    def __init__(self, rules: Sequence[Rule]):
        """
        Initialize rule engine.

        Args:
            rules: Rules in evaluation order
        """
        self._rules: Tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def with_rules(self, *rules: Rule) -> "RuleEngine":
        """Return a new engine with ``rules`` appended after the current ones."""
        return RuleEngine(self._rules + rules)

    def run(self, files: Iterable[FileChange]) -> List[Issue]:
        """
        Run every rule against every file.

        Args:
            files: File changes in diff order

        Returns:
            Issues in file order, then rule order
        """
        issues: List[Issue] = []
        file_count = 0
        for file_change in files:
            file_count += 1
            for rule in self._rules:
                found = rule.check(file_change)
                if found:
                    logger.debug(f"Rule {rule.rule_id} found {len(found)} issues in {file_change.path}")
                issues.extend(found)

        logger.info(f"Rule engine: {len(issues)} issues across {file_count} files")
        return issues


def create_default_rules(config: Optional[RulesConfig] = None) -> List[Rule]:
    """Build the default rule list: todo, secrets, large-diff."""
    config = config or RulesConfig()
    return [
        TodoRule(config.todo_markers),
        SecretRule(config.secret_markers),
        LargeDiffRule(config.large_diff_threshold),
    ]


def create_default_engine(config: Optional[RulesConfig] = None) -> RuleEngine:
    """
    Build a rule engine with the default rule set.

    Args:
        config: Optional rules configuration (defaults: threshold 200)

    Returns:
        New RuleEngine instance
    """
    return RuleEngine(create_default_rules(config))
