"""Add Self Qualifiers / Remove Self Qualifiers rewrites."""

from collections.abc import Sequence

from selfqualify.core.errors import ParseError
from selfqualify.core.pipeline import add_qualifiers, parse_source, remove_qualifiers
from selfqualify.core.refactoring_base import RefactoringBase


class _SelfQualifierRefactoring(RefactoringBase):
    def __init__(self, context_sources: Sequence[str] = ()):
        """Initialize the rewrite.

        Args:
            context_sources: Sources of the context files, one string per file
        """
        self.context_sources = list(context_sources)

    def validate(self, source: str) -> bool:
        """Check that the target and every context source parse."""
        try:
            for index, context in enumerate(self.context_sources, start=1):
                parse_source(context, f"context #{index}")
            parse_source(source, "target")
        except ParseError:
            return False
        return True


class AddSelfQualifiers(_SelfQualifierRefactoring):
    """Qualify bare references to class members, e.g. total() -> self.total()."""

    def apply(self, source: str) -> str:
        return add_qualifiers(self.context_sources, source)


class RemoveSelfQualifiers(_SelfQualifierRefactoring):
    """Strip redundant qualifiers from member accesses, e.g. self.total() -> total()."""

    def apply(self, source: str) -> str:
        return remove_qualifiers(self.context_sources, source)
