"""
Review Pipeline API

Main interface that runs the complete analysis: diff parsing,
rule checks, static analysis and review synthesis.
"""

import logging
from typing import Iterable, List, Mapping, Optional
from dataclasses import dataclass

from .analysis import StaticAnalyzer, create_default_analyzer
from .config import AppConfig
from .diff import UnifiedDiffParser
from .models.diff import FileChange
from .models.review import Issue, ReviewResult
from .review import ReviewSynthesizer
from .rules import RuleEngine, create_default_engine


logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Result of one pipeline run."""
    files: List[FileChange]
    issues: List[Issue]
    review: ReviewResult


class ReviewPipeline:
    """
    Review analysis pipeline.

    Runs the analysis steps in order:
    1. Parse the unified diff into classified file changes
    2. Apply the rule engine to the file changes
    3. Statically analyze the full content of supported files
    4. Synthesize a summary and ordered line comments

    The pipeline performs no I/O. Diff text and file contents are supplied
    by the caller, and every run works on its own collections, so a single
    pipeline can serve concurrent requests.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        rule_engine: Optional[RuleEngine] = None,
        static_analyzer: Optional[StaticAnalyzer] = None,
        synthesizer: Optional[ReviewSynthesizer] = None,
    ):
        """
        Initialize review pipeline.

        Args:
            config: Optional configuration object (defaults when omitted)
            rule_engine: Rule engine overriding the configured default
            static_analyzer: Static analyzer overriding the configured default
            synthesizer: Review synthesizer overriding the default
        """
        self.config = config or AppConfig()

        self.parser = UnifiedDiffParser()
        self.rule_engine = rule_engine or create_default_engine(self.config.rules)
        self.static_analyzer = static_analyzer or create_default_analyzer(self.config.analysis)
        self.synthesizer = synthesizer or ReviewSynthesizer()

    def parse(self, diff_text: str) -> List[FileChange]:
        """
        Parse diff text into file changes.

        Raises:
            MalformedInputError: If the diff is malformed
        """
        return self.parser.parse(diff_text)

    def source_paths(self, files: Iterable[FileChange]) -> List[str]:
        """Paths the caller should fetch full content for."""
        return self.static_analyzer.source_paths(files)

    def analyze(
        self,
        diff_text: str,
        contents: Optional[Mapping[str, str]] = None,
        extra_issues: Optional[Iterable[Issue]] = None,
    ) -> PipelineResult:
        """
        Run the complete analysis.

        Args:
            diff_text: Unified diff of the change
            contents: Full post-change content keyed by path
            extra_issues: Issues from other reviewers, appended after
                rule and static analysis issues

        Returns:
            PipelineResult with parsed files, all issues and the review

        Raises:
            MalformedInputError: If the diff is malformed; nothing is returned
        """
        files = self.parse(diff_text)

        issues = self.rule_engine.run(files)
        issues.extend(self.static_analyzer.analyze(files, contents or {}))
        if extra_issues:
            issues.extend(extra_issues)

        review = self.synthesizer.generate(issues)

        logger.info(f"Review pipeline completed: {len(files)} files, {len(issues)} issues, "
                    f"{len(review.comments)} comments")
        return PipelineResult(files=files, issues=issues, review=review)
