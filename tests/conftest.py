"""Pytest configuration and shared fixtures for selfqualify tests."""

import ast
import shutil
from pathlib import Path
from typing import Any, Optional

import pytest


class RefactoringTestBase:
    """Base class for rewrite tests with automatic fixture management.

    Usage:
        class TestAddSelf(RefactoringTestBase):
            fixture_category = "add_self"

            def test_inherited_method(self):
                self.refactor("add-self")

    Convention:
        - Test method name (minus 'test_' prefix) maps to fixture directory name
        - Fixture directory contains input.py and expected.py
        - Optional context.py, or a context/ directory of .py files, supplies
          superclass declarations and is passed as the context parameter
        - Example: test_inherited_method() -> fixtures/add_self/inherited_method/
    """

    fixture_category: Optional[str] = None  # Must be set in subclass

    @pytest.fixture(autouse=True)
    def _setup_fixture(self, tmp_path: Path, request: pytest.FixtureRequest) -> None:  # type: ignore[misc]
        """Automatically set up fixture files before each test.

        Creates:
            self.tmp_path: Temporary directory for this test
            self.test_file: Path to input.py (copied to tmp_path)
            self.expected_file: Path to expected.py (in fixtures)
            self.context_files: Context file paths (in fixtures), possibly empty
        """
        self.tmp_path = tmp_path
        self.context_files: list[Path] = []

        # test_simple_case -> simple_case
        test_name = request.function.__name__
        if test_name.startswith("test_"):
            fixture_name = test_name[5:]
        else:
            fixture_name = test_name

        if self.fixture_category is None:
            raise ValueError(f"{self.__class__.__name__} must set fixture_category class attribute")

        fixture_dir = Path(__file__).parent / "fixtures" / self.fixture_category / fixture_name

        if fixture_dir.exists():
            input_file = fixture_dir / "input.py"
            expected_file = fixture_dir / "expected.py"
            if not (input_file.exists() and expected_file.exists()):
                raise FileNotFoundError(
                    f"Fixture directory {fixture_dir} must contain input.py and expected.py"
                )
            self.test_file: Optional[Path] = self.tmp_path / "input.py"
            self.expected_file: Optional[Path] = expected_file
            shutil.copy(input_file, self.test_file)
            self.context_files = self._find_context_files(fixture_dir)
        else:
            # Allow tests without fixtures (for unit tests, etc.)
            self.test_file = None
            self.expected_file = None

        yield

    @staticmethod
    def _find_context_files(fixture_dir: Path) -> list[Path]:
        context_file = fixture_dir / "context.py"
        context_dir = fixture_dir / "context"
        if context_file.exists():
            return [context_file]
        if context_dir.is_dir():
            return sorted(context_dir.glob("*.py"))
        return []

    def refactor(self, command_name: str, normalize: bool = False, **params: Any) -> None:
        """Run a rewrite command and assert the result matches expected output.

        Args:
            command_name: Name of the command (e.g., "add-self")
            normalize: Compare ASTs instead of exact text
            **params: Extra parameters for the command. The fixture's context
                files are passed as context unless given explicitly.

        Raises:
            AssertionError: If rewritten output doesn't match expected
        """
        # Import here to avoid circular dependencies during test collection
        from selfqualify.cli import refactor_file

        if self.test_file is None:
            raise RuntimeError("No fixture loaded. Ensure fixture directory exists for this test.")
        params.setdefault("context", self.context_files)
        refactor_file(command_name, self.test_file, **params)

        self.assert_matches_expected(normalize)

    def assert_matches_expected(self, normalize: bool = False) -> None:
        """Assert that the test file matches the expected file.

        Args:
            normalize: If True, use AST comparison (ignores formatting).
                      If False, use exact string comparison, which also checks
                      that line numbers are unchanged.
        """
        if self.test_file is None or self.expected_file is None:
            raise RuntimeError("No fixture loaded")

        actual = self.test_file.read_text()
        expected = self.expected_file.read_text()

        if normalize:
            self._assert_ast_equal(actual, expected)
        else:
            assert actual == expected, self._format_diff(actual, expected)

    def _assert_ast_equal(self, actual: str, expected: str) -> None:
        """Compare two code strings by AST structure."""
        try:
            actual_ast = ast.parse(actual)
            expected_ast = ast.parse(expected)
        except SyntaxError as e:
            pytest.fail(f"Syntax error in compared code: {e}")

        if ast.dump(actual_ast) != ast.dump(expected_ast):
            pytest.fail(
                f"AST mismatch:\n\n"
                f"Expected code:\n{expected}\n\n"
                f"Actual code:\n{actual}\n\n"
                f"{self._format_diff(actual, expected)}"
            )

    def _format_diff(self, actual: str, expected: str) -> str:
        """Format a readable diff between actual and expected."""
        import difflib

        diff = difflib.unified_diff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
            fromfile="expected.py",
            tofile="actual.py",
            lineterm="",
        )

        return "".join(diff)
