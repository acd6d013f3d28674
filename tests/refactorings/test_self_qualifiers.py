"""Tests for the AddSelfQualifiers / RemoveSelfQualifiers rewrites."""

import pytest

from selfqualify.core.errors import ParseError
from selfqualify.refactorings import AddSelfQualifiers, RemoveSelfQualifiers

CONTEXT = "class Base:\n    def foo(self):\n        pass\n"


class TestAddSelfQualifiers:
    """Tests for AddSelfQualifiers."""

    def test_apply_uses_context(self) -> None:
        source = "class Child(Base):\n    def bar(self):\n        return foo()\n"

        result = AddSelfQualifiers([CONTEXT]).apply(source)

        assert result == "class Child(Base):\n    def bar(self):\n        return self.foo()\n"

    def test_apply_raises_on_syntax_error(self) -> None:
        with pytest.raises(ParseError):
            AddSelfQualifiers().apply("def broken(:\n")

    def test_validate(self) -> None:
        assert AddSelfQualifiers([CONTEXT]).validate("x = 1\n")
        assert not AddSelfQualifiers([CONTEXT]).validate("def broken(:\n")
        assert not AddSelfQualifiers(["class (:\n"]).validate("x = 1\n")


class TestRemoveSelfQualifiers:
    """Tests for RemoveSelfQualifiers."""

    def test_apply_uses_context(self) -> None:
        source = "class Child(Base):\n    def bar(self):\n        return self.foo()\n"

        result = RemoveSelfQualifiers([CONTEXT]).apply(source)

        assert result == "class Child(Base):\n    def bar(self):\n        return foo()\n"

    def test_non_member_access_untouched(self) -> None:
        source = "class Child(Base):\n    def bar(self):\n        return self.foo()\n"

        assert RemoveSelfQualifiers().apply(source) == source
