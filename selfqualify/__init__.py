"""Add or strip self qualifiers on references to class members."""

from selfqualify.core.errors import ParseError
from selfqualify.core.pipeline import add_qualifiers, remove_qualifiers

__version__ = "0.1.0"

__all__ = ["ParseError", "add_qualifiers", "remove_qualifiers", "__version__"]
