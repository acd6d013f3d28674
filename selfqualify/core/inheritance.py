"""Effective member sets: own members plus one level of inherited members."""

from typing import Optional

import libcst as cst

from selfqualify.core.member_catalog import ClassCatalog, MemberSet, class_members


def superclass_name(class_def: cst.ClassDef) -> Optional[str]:
    """Get the name of a class's single superclass.

    Only a lone positional base that is a bare identifier counts. Keyword
    arguments such as metaclass= are ignored. Multiple bases, dotted names,
    subscripts and calls like mixin(Base) all give None.

    Args:
        class_def: The class definition

    Returns:
        The superclass name, or None if there is no usable superclass
    """
    positional = [arg for arg in class_def.bases if arg.keyword is None and not arg.star]
    if len(positional) != 1:
        return None
    base = positional[0].value
    if isinstance(base, cst.Name):
        return base.value
    return None


def resolve(class_def: cst.ClassDef, catalog: ClassCatalog) -> MemberSet:
    """Compute the member names visible as bare references inside a class body.

    The grandparent chain is deliberately not followed: only the direct
    superclass's own members are added.

    Args:
        class_def: The class whose body is about to be rewritten
        catalog: Merged catalog of context and target classes

    Returns:
        Union of the class's own members and its superclass's catalog entry
    """
    members = class_members(class_def)
    parent = superclass_name(class_def)
    if parent is not None and parent in catalog:
        members = members | catalog.members(parent)
    return members
