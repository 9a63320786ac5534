"""
Logging standards verification tests.

Validates that logging calls in src/ use lazy % formatting rather than
f-strings (W1203).
"""

import ast
from pathlib import Path

import pytest


def find_python_files(directory: Path) -> list[Path]:
    """Find all Python files in directory, excluding __pycache__."""
    return [path for path in directory.rglob("*.py") if "__pycache__" not in str(path)]


def extract_logger_calls(source_code: str) -> list[tuple[int, str, str]]:
    """
    Extract logger calls from source code.

    Returns list of (line_number, method_name, format_arg) tuples.
    """
    tree = ast.parse(source_code)
    logger_calls = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.Call) or not isinstance(node.func, ast.Attribute):
            continue
        method_name = node.func.attr
        if method_name not in ("debug", "info", "warning", "error", "critical", "exception"):
            continue
        if node.args:
            logger_calls.append((node.lineno, method_name, ast.unparse(node.args[0])))

    return logger_calls


def has_fstring_formatting(arg_repr: str) -> bool:
    """Check if argument uses f-string formatting."""
    return arg_repr.startswith('f"') or arg_repr.startswith("f'")


@pytest.fixture
def project_root():
    # tests/unit/ -> project root
    return Path(__file__).parent.parent.parent


@pytest.fixture
def all_src_files(project_root):
    return find_python_files(project_root / "src")


def test_src_files_found(all_src_files):
    assert len(all_src_files) > 0, "No Python files found in src directory"


def test_no_fstring_in_logging_calls(all_src_files, project_root):
    """Test that no logging calls use f-string formatting (W1203)."""
    violations = []

    for filepath in all_src_files:
        source = filepath.read_text(encoding="utf-8")
        for line_number, method_name, arg_repr in extract_logger_calls(source):
            if has_fstring_formatting(arg_repr):
                relative_path = filepath.relative_to(project_root)
                violations.append(
                    f"{relative_path}:{line_number} - logger.{method_name}({arg_repr})"
                )

    if violations:
        pytest.fail(
            "Found f-string formatting in logging calls (W1203 violation).\n"
            "Use lazy % formatting instead:\n"
            "  ✗ logger.info(f'Processing {count} items')\n"
            "  ✓ logger.info('Processing %d items', count)\n\n"
            "Violations:\n" + "\n".join(violations)
        )


def test_parser_can_extract_logger_calls():
    """Test that parser correctly identifies logger calls."""
    sample_code = """
import logging
logger = logging.getLogger(__name__)

def example():
    logger.info("Static message")
    logger.warning("Value: %s", value)
    logger.error(f"Bad: {value}")
    logger.debug("Count: %d", count)
"""
    calls = extract_logger_calls(sample_code)
    assert len(calls) == 4
    assert {method for _, method, _ in calls} == {"info", "warning", "error", "debug"}


def test_fstring_detection():
    assert has_fstring_formatting('f"test"') is True
    assert has_fstring_formatting("f'test'") is True
    assert has_fstring_formatting('"test"') is False
    assert has_fstring_formatting('"Processing %s"') is False
