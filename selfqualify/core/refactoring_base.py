"""Base classes for source-to-source rewrites."""

from abc import ABC, abstractmethod


class RefactoringBase(ABC):
    """Base class for all rewrite operations."""

    @abstractmethod
    def apply(self, source: str) -> str:
        """Apply the rewrite to the given source code.

        Args:
            source: Python source code to rewrite

        Returns:
            Rewritten source code
        """
        pass

    @abstractmethod
    def validate(self, source: str) -> bool:
        """Validate that the rewrite can be applied.

        Args:
            source: Python source code to validate

        Returns:
            True if the rewrite can be applied, False otherwise
        """
        pass
