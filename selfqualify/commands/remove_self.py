"""Remove Self refactoring command."""

from selfqualify.commands.base import BaseCommand
from selfqualify.commands.registry import register_command
from selfqualify.refactorings.self_qualifiers import RemoveSelfQualifiers


class RemoveSelfCommand(BaseCommand):
    """Command to strip redundant self qualifiers from member accesses."""

    name = "remove-self"

    def validate(self) -> None:
        """Validate parameters.

        Raises:
            ValueError: If the context parameter is not a list of paths
        """
        if isinstance(self.params.get("context", ()), str):
            raise ValueError("Parameter 'context' for remove-self must be a list of paths")

    def execute(self) -> None:
        """Strip redundant qualifiers in the file."""
        self.apply_rewrite(RemoveSelfQualifiers(self.read_context_sources()))


# Register the command
register_command(RemoveSelfCommand)
