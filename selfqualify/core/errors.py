"""Exceptions raised while rewriting self qualifiers."""

import libcst as cst


class ParseError(ValueError):
    """Raised when a context or target source is not valid Python.

    Attributes:
        source_label: Which input failed, e.g. "target" or "context #2"
        syntax_error: The underlying libcst parser error
    """

    def __init__(self, source_label: str, syntax_error: cst.ParserSyntaxError) -> None:
        self.source_label = source_label
        self.syntax_error = syntax_error
        super().__init__(f"Failed to parse {source_label} source: {syntax_error.message}")

    @property
    def line(self) -> int:
        """Line number of the syntax error (1-indexed)."""
        return self.syntax_error.raw_line
