"""Add Self refactoring command."""

from selfqualify.commands.base import BaseCommand
from selfqualify.commands.registry import register_command
from selfqualify.refactorings.self_qualifiers import AddSelfQualifiers


class AddSelfCommand(BaseCommand):
    """Command to qualify bare references to class members with self."""

    name = "add-self"

    def validate(self) -> None:
        """Validate parameters.

        Raises:
            ValueError: If the context parameter is not a list of paths
        """
        if isinstance(self.params.get("context", ()), str):
            raise ValueError("Parameter 'context' for add-self must be a list of paths")

    def execute(self) -> None:
        """Qualify member references in the file."""
        self.apply_rewrite(AddSelfQualifiers(self.read_context_sources()))


# Register the command
register_command(AddSelfCommand)
