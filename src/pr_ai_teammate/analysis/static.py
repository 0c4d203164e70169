"""
Static Analyzer

Runs the language analyzer registered for each changed file's extension
over that file's full content. A file that fails to parse becomes a single
``parse-error`` issue; the rest of the batch is still analyzed.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..config import AnalysisConfig
from ..models.diff import FileChange
from ..models.review import Issue, Severity
from .base import LanguageAnalyzer, PerFileAnalysisError
from .python import PythonAnalyzer


logger = logging.getLogger(__name__)


PARSE_ERROR_RULE_ID = 'parse-error'


class StaticAnalyzer:
    """
    Dispatches changed files to per-language analyzers.

    Files without a registered analyzer, or without non-blank content, are
    skipped silently.
    """

    def __init__(self, analyzers: Sequence[LanguageAnalyzer]):
        """
        Initialize static analyzer.

        Args:
            analyzers: Language analyzers; a later analyzer claiming the
                same extension replaces an earlier one
        """
        self._by_extension: Dict[str, LanguageAnalyzer] = {}
        for analyzer in analyzers:
            for extension in analyzer.extensions:
                self._by_extension[extension.lower()] = analyzer

    @property
    def extensions(self) -> List[str]:
        return sorted(self._by_extension)

    def analyzer_for(self, path: str) -> Optional[LanguageAnalyzer]:
        name = path.rsplit('/', 1)[-1].lower()
        if '.' not in name:
            return None
        return self._by_extension.get('.' + name.rsplit('.', 1)[-1])

    def supports(self, path: str) -> bool:
        """Check if a file would be analyzed given its content."""
        return self.analyzer_for(path) is not None

    def source_paths(self, files: Iterable[FileChange]) -> List[str]:
        """Paths whose full content is worth fetching for analysis."""
        return [f.path for f in files if self.supports(f.path)]

    def analyze(self, files: Iterable[FileChange], contents: Mapping[str, str]) -> List[Issue]:
        """
        Analyze every eligible file.

        Args:
            files: Changed files in diff order
            contents: Full post-change content keyed by path

        Returns:
            Issues in file order
        """
        issues: List[Issue] = []
        analyzed = 0

        for file_change in files:
            analyzer = self.analyzer_for(file_change.path)
            if analyzer is None:
                continue

            source = contents.get(file_change.path)
            if source is None or not source.strip():
                logger.debug(f"No content for {file_change.path}, skipping static analysis")
                continue

            analyzed += 1
            issues.extend(self._analyze_file(analyzer, file_change.path, source))

        logger.info(f"Static analysis: {len(issues)} issues across {analyzed} files")
        return issues

    def _analyze_file(self, analyzer: LanguageAnalyzer, path: str, source: str) -> List[Issue]:
        try:
            return analyzer.analyze(path, source)
        except PerFileAnalysisError as e:
            logger.warning(str(e))
            return [Issue(
                file_path=path,
                line=0,
                rule_id=PARSE_ERROR_RULE_ID,
                severity=Severity.HIGH,
                message=f"Failed to parse {analyzer.language} file for static analysis.",
            )]


def create_default_analyzer(config: Optional[AnalysisConfig] = None) -> StaticAnalyzer:
    """
    Build a static analyzer with the configured language analyzers.

    Args:
        config: Optional analysis configuration (defaults: Python, 50 lines)

    Returns:
        New StaticAnalyzer instance
    """
    config = config or AnalysisConfig()
    analyzers: List[LanguageAnalyzer] = []
    languages = {language.lower() for language in config.languages}
    if 'python' in languages:
        analyzers.append(PythonAnalyzer(max_function_lines=config.max_function_lines))
    return StaticAnalyzer(analyzers)
