"""
Unit tests for static analysis.
"""

import textwrap

import pytest

from pr_ai_teammate.analysis import (
    PythonAnalyzer,
    PerFileAnalysisError,
    StaticAnalyzer,
    create_default_analyzer,
)
from pr_ai_teammate.analysis import python as python_analysis
from pr_ai_teammate.config import AnalysisConfig
from pr_ai_teammate.models.diff import FileChange, FileType
from pr_ai_teammate.models.review import Severity


def make_file(path: str) -> FileChange:
    return FileChange(path=path, file_type=FileType.PRODUCTION)


def long_function(body_lines: int, name: str = "handler") -> str:
    return f"def {name}():\n" + "    x = 1\n" * body_lines


class TestPythonAnalyzer:
    """Unit tests for PythonAnalyzer class."""

    def test_51_line_function(self):
        """Test that a 51-line function yields one Medium issue at its start."""
        issues = PythonAnalyzer().analyze("app.py", long_function(50))

        assert len(issues) == 1
        assert issues[0].rule_id == "function-too-long"
        assert issues[0].severity == Severity.MEDIUM
        assert issues[0].line == 1

    def test_50_line_function_is_fine(self):
        """Test the inclusive 50-line limit."""
        assert PythonAnalyzer().analyze("app.py", long_function(49)) == []

    def test_function_start_line_after_decorator(self):
        """Test that the issue sits on the def line."""
        source = "import functools\n\n\n@functools.lru_cache\n" + long_function(60)
        issues = PythonAnalyzer().analyze("app.py", source)

        assert [i.line for i in issues] == [5]

    def test_methods_and_async_functions(self):
        """Test methods and async functions are measured."""
        source = "class Service:\n" + textwrap.indent(long_function(55, "run"), "    ")
        source += "\n\nasync " + long_function(55, "fetch")
        issues = PythonAnalyzer().analyze("svc.py", source)

        assert [i.rule_id for i in issues] == ["function-too-long", "function-too-long"]
        assert issues[0].line == 2

    def test_custom_limit_and_disable(self):
        """Test a configured limit and a disabled check."""
        source = long_function(10)

        assert len(PythonAnalyzer(max_function_lines=5).analyze("a.py", source)) == 1
        assert PythonAnalyzer(max_function_lines=0).analyze("a.py", long_function(100)) == []

    @pytest.mark.parametrize("condition", [
        "err is not None",
        "err != None",
        "None is not error",
        "exc is not None",
    ])
    def test_empty_error_check(self, condition):
        """Test empty branches testing an error value."""
        source = textwrap.dedent(f"""\
            def load(err):
                if {condition}:
                    pass
                return 1
        """)
        issues = PythonAnalyzer().analyze("load.py", source)

        assert len(issues) == 1
        assert issues[0].rule_id == "empty-error-handling"
        assert issues[0].severity == Severity.HIGH
        assert issues[0].line == 2

    def test_handled_error_check_is_fine(self):
        """Test that a branch doing something is not flagged."""
        source = textwrap.dedent("""\
            def load(err):
                if err is not None:
                    raise err
                if err is None:
                    pass
        """)
        assert PythonAnalyzer().analyze("load.py", source) == []

    def test_empty_except_handler(self):
        """Test except blocks that discard the exception."""
        source = textwrap.dedent("""\
            def run(task):
                try:
                    task()
                except ValueError:
                    ...
        """)
        issues = PythonAnalyzer().analyze("run.py", source)

        assert [(i.rule_id, i.line) for i in issues] == [("empty-error-handling", 4)]

    def test_abort_calls(self):
        """Test process-terminating calls."""
        source = textwrap.dedent("""\
            import os
            import sys

            def main():
                sys.exit(1)
                os._exit(2)
                os.abort()
                exit()
                print("unreachable")
        """)
        issues = PythonAnalyzer().analyze("main.py", source)

        assert [(i.rule_id, i.line) for i in issues] == [
            ("abort-call", 5),
            ("abort-call", 6),
            ("abort-call", 7),
            ("abort-call", 8),
        ]
        assert all(i.severity == Severity.MEDIUM for i in issues)
        assert "sys.exit" in issues[0].message
        assert "exception" in issues[0].message

    def test_syntax_error_raises(self):
        """Test that unparseable source raises PerFileAnalysisError."""
        with pytest.raises(PerFileAnalysisError) as exc_info:
            PythonAnalyzer().analyze("bad.py", "def broken(:\n")

        assert exc_info.value.path == "bad.py"


class TestStaticAnalyzer:
    """Unit tests for StaticAnalyzer class."""

    def test_parse_error_is_isolated(self):
        """Test that one bad file does not stop the batch."""
        files = [make_file("bad.py"), make_file("good.py")]
        contents = {"bad.py": "def broken(:\n", "good.py": long_function(60)}
        issues = create_default_analyzer().analyze(files, contents)

        assert [(i.file_path, i.rule_id, i.line) for i in issues] == [
            ("bad.py", "parse-error", 0),
            ("good.py", "function-too-long", 1),
        ]
        assert issues[0].severity == Severity.HIGH

    def test_deeply_nested_file_is_isolated(self, monkeypatch):
        """Test that a tree too deep to walk does not stop the batch."""
        original_visit = python_analysis._IssueCollector.visit

        def visit(collector, node):
            if collector.path == "deep.py":
                raise RecursionError("maximum recursion depth exceeded")
            return original_visit(collector, node)

        monkeypatch.setattr(python_analysis._IssueCollector, "visit", visit)
        files = [make_file("deep.py"), make_file("good.py")]
        contents = {"deep.py": "x = " + "+".join(["1"] * 600), "good.py": "import sys\nsys.exit(1)\n"}
        issues = create_default_analyzer().analyze(files, contents)

        assert [(i.file_path, i.rule_id, i.line) for i in issues] == [
            ("deep.py", "parse-error", 0),
            ("good.py", "abort-call", 2),
        ]
        assert issues[0].severity == Severity.HIGH

    def test_skips_unsupported_and_missing_content(self):
        """Test that unsupported, missing and blank files are skipped."""
        files = [make_file("main.go"), make_file("missing.py"), make_file("blank.py"), make_file("Makefile")]
        contents = {"main.go": "package main\nfunc main() { panic(1) }\n", "blank.py": "  \n\n", "Makefile": "x"}

        assert create_default_analyzer().analyze(files, contents) == []

    def test_source_paths(self):
        """Test which paths are worth fetching."""
        files = [make_file("main.go"), make_file("app/Service.PY"), make_file("README")]
        analyzer = create_default_analyzer()

        assert analyzer.source_paths(files) == ["app/Service.PY"]
        assert analyzer.supports("x.py")
        assert not analyzer.supports("x.pyc")

    def test_no_languages(self):
        """Test an analyzer with no languages configured."""
        analyzer = create_default_analyzer(AnalysisConfig(languages=[]))

        assert analyzer.extensions == []
        assert analyzer.analyze([make_file("a.py")], {"a.py": "def broken(:\n"}) == []

    def test_config_limit(self):
        """Test the function length limit from configuration."""
        analyzer = create_default_analyzer(AnalysisConfig(max_function_lines=3))
        issues = analyzer.analyze([make_file("a.py")], {"a.py": long_function(3)})

        assert [i.rule_id for i in issues] == ["function-too-long"]

    def test_custom_analyzer_registration(self):
        """Test that analyzers are keyed by extension."""
        analyzer = StaticAnalyzer([PythonAnalyzer()])

        assert analyzer.analyzer_for("pkg/mod.py").language == "python"
        assert analyzer.analyzer_for("pkg/mod") is None
