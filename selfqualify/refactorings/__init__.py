"""Self qualifier rewrites.

This module contains the source-level rewrites that add or strip the self
qualifier on references to class members.
"""

from selfqualify.refactorings.self_qualifiers import AddSelfQualifiers, RemoveSelfQualifiers

__all__ = ["AddSelfQualifiers", "RemoveSelfQualifiers"]
