"""Base class for all rewrite commands."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Optional

from selfqualify.core.refactoring_base import RefactoringBase


class BaseCommand(ABC):
    """Base class for all rewrite commands."""

    name: str  # e.g., "add-self"

    def __init__(self, file_path: Path, **params: Any):
        """Initialize the command.

        Args:
            file_path: Path to the file to rewrite
            **params: Additional parameters for the command
        """
        self.file_path = file_path
        self.params = params

    @abstractmethod
    def execute(self) -> None:
        """Execute the rewrite and write the result.

        Raises:
            ValueError: If the rewrite cannot be applied
        """
        pass

    @abstractmethod
    def validate(self) -> None:
        """Validate parameters before execution.

        Raises:
            ValueError: If parameters are invalid
        """
        pass

    def read_context_sources(self) -> list[str]:
        """Read every file named by the context parameter.

        Returns:
            One source string per context file, in the order given
        """
        return [Path(path).read_text() for path in self.params.get("context", ())]

    def apply_rewrite(self, refactoring: RefactoringBase) -> None:
        """Apply a rewrite to the file.

        The result goes to the output parameter when it is set, otherwise the
        file is rewritten in place. Nothing is written if the rewrite fails.

        Args:
            refactoring: The rewrite to apply
        """
        source_code = self.file_path.read_text()
        modified = refactoring.apply(source_code)
        output: Optional[Path] = self.params.get("output")
        Path(output or self.file_path).write_text(modified)
