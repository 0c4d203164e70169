"""
Python Analyzer

Parses Python sources with the standard ``ast`` module and flags long
functions, error branches that do nothing, and calls that terminate the
process.
"""

import ast
import logging
from typing import List, Optional

from ..models.review import Issue, Severity
from .base import LanguageAnalyzer, PerFileAnalysisError


logger = logging.getLogger(__name__)


DEFAULT_MAX_FUNCTION_LINES = 50

ERROR_NAMES = {'err', 'error', 'exc'}

# Calls that end the process instead of letting the caller recover
ABORT_BUILTINS = {'exit', 'quit'}
ABORT_ATTRIBUTES = {('sys', 'exit'), ('os', '_exit'), ('os', 'abort')}


def _is_noop(body: List[ast.stmt]) -> bool:
    """True when a block only contains ``pass`` or ``...``."""
    for stmt in body:
        if isinstance(stmt, ast.Pass):
            continue
        if (isinstance(stmt, ast.Expr) and isinstance(stmt.value, ast.Constant)
                and stmt.value.value is Ellipsis):
            continue
        return False
    return True


def _is_none(node: ast.AST) -> bool:
    return isinstance(node, ast.Constant) and node.value is None


def _is_error_name(node: ast.AST) -> bool:
    return isinstance(node, ast.Name) and node.id in ERROR_NAMES


def _is_error_present_check(test: ast.AST) -> bool:
    """Match ``err is not None`` / ``err != None`` (either operand order)."""
    if not isinstance(test, ast.Compare) or len(test.ops) != 1:
        return False
    if not isinstance(test.ops[0], (ast.IsNot, ast.NotEq)):
        return False
    left, right = test.left, test.comparators[0]
    return (_is_error_name(left) and _is_none(right)) or (_is_none(left) and _is_error_name(right))


def _abort_call_name(call: ast.Call) -> Optional[str]:
    func = call.func
    if isinstance(func, ast.Name) and func.id in ABORT_BUILTINS:
        return func.id
    if isinstance(func, ast.Attribute) and isinstance(func.value, ast.Name):
        if (func.value.id, func.attr) in ABORT_ATTRIBUTES:
            return f"{func.value.id}.{func.attr}"
    return None


class _IssueCollector(ast.NodeVisitor):
    """Walks one module in source order, collecting issues."""

    def __init__(self, path: str, max_function_lines: int):
        self.path = path
        self.max_function_lines = max_function_lines
        self.issues: List[Issue] = []

    def _add(self, line: int, rule_id: str, severity: Severity, message: str) -> None:
        self.issues.append(Issue(
            file_path=self.path,
            line=line,
            rule_id=rule_id,
            severity=severity,
            message=message,
        ))

    def _check_function(self, node) -> None:
        if self.max_function_lines > 0:
            end = node.end_lineno or node.lineno
            length = end - node.lineno + 1
            if length > self.max_function_lines:
                self._add(
                    node.lineno,
                    'function-too-long',
                    Severity.MEDIUM,
                    f"Function '{node.name}' spans {length} lines (limit {self.max_function_lines}); "
                    f"consider refactoring.",
                )
        self.generic_visit(node)

    visit_FunctionDef = _check_function
    visit_AsyncFunctionDef = _check_function

    def visit_If(self, node: ast.If) -> None:
        if _is_error_present_check(node.test) and _is_noop(node.body):
            self._add(node.lineno, 'empty-error-handling', Severity.HIGH,
                      "Empty error handling block detected.")
        self.generic_visit(node)

    def visit_ExceptHandler(self, node: ast.ExceptHandler) -> None:
        if _is_noop(node.body):
            self._add(node.lineno, 'empty-error-handling', Severity.HIGH,
                      "Empty error handling block detected; the exception is silently discarded.")
        self.generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:
        name = _abort_call_name(node)
        if name:
            self._add(node.lineno, 'abort-call', Severity.MEDIUM,
                      f"{name} call detected; consider raising an exception instead.")
        self.generic_visit(node)


class PythonAnalyzer(LanguageAnalyzer):
    """Static analyzer for Python source files."""

    language = 'python'
    extensions = ('.py',)

    def __init__(self, max_function_lines: int = DEFAULT_MAX_FUNCTION_LINES):
        """
        Initialize Python analyzer.

        Args:
            max_function_lines: Longest allowed function, in lines;
                zero or less disables the check
        """
        self.max_function_lines = max_function_lines

    def parse(self, path: str, source: str) -> ast.Module:
        try:
            return ast.parse(source, filename=path)
        except SyntaxError as e:
            raise PerFileAnalysisError(path, f"line {e.lineno}: {e.msg}") from e
        except (ValueError, RecursionError) as e:
            raise PerFileAnalysisError(path, str(e) or type(e).__name__) from e

    def analyze(self, path: str, source: str) -> List[Issue]:
        tree = self.parse(path, source)
        collector = _IssueCollector(path, self.max_function_lines)
        try:
            collector.visit(tree)
        except RecursionError as e:
            # Valid but too deeply nested to walk (e.g. long operator chains)
            raise PerFileAnalysisError(path, "syntax tree too deeply nested to analyze") from e
        logger.debug(f"Python analysis of {path}: {len(collector.issues)} issues")
        return collector.issues
