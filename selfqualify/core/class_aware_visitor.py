"""Base class for libcst visitors with class/method context tracking.

This module provides ClassAwareVisitor, a base class that extends libcst.CSTVisitor
to track which class body and which method body the traversal is currently in,
together with the method's self qualifier and the class's effective member set.
"""

from dataclasses import dataclass
from typing import Optional

import libcst as cst

from selfqualify.core.inheritance import resolve
from selfqualify.core.member_catalog import ClassCatalog, MemberSet


@dataclass
class ClassContext:
    """State for one class body on the traversal stack.

    Attributes:
        class_def: The class whose body is being visited
        members: Effective member set of the class
        method: The method whose body is being visited, if any
        qualifier: Name of the method's self parameter, if it has one
    """

    class_def: cst.ClassDef
    members: MemberSet
    method: Optional[cst.FunctionDef] = None
    qualifier: Optional[str] = None


def qualifier_name(method: cst.FunctionDef) -> Optional[str]:
    """Get the name a method uses to refer to its instance or class.

    This is the first positional parameter (self, cls, or whatever the author
    chose). Static methods and methods without positional parameters have none.

    Args:
        method: A function defined in a class body

    Returns:
        The qualifier name, or None
    """
    for decorator in method.decorators:
        if isinstance(decorator.decorator, cst.Name) and decorator.decorator.value == "staticmethod":
            return None
    positional = [*method.params.posonly_params, *method.params.params]
    if not positional:
        return None
    return positional[0].name.value


class ClassAwareVisitor(cst.CSTVisitor):
    """Visitor that tracks class and method context during traversal.

    Class decorators, bases and keywords are visited in the enclosing context
    because Python evaluates them there. Method decorators, defaults and
    annotations are evaluated in the class scope, which has no qualifier, so only
    the method body is visited in method context. Functions nested in a method
    inherit that method's context.

    Attributes:
        catalog: Merged class catalog used to resolve effective member sets
    """

    def __init__(self, catalog: ClassCatalog) -> None:
        self.catalog = catalog
        self._class_stack: list[ClassContext] = []

    @property
    def current_class(self) -> Optional[ClassContext]:
        """The innermost class context, or None at module level."""
        return self._class_stack[-1] if self._class_stack else None

    @property
    def current_method(self) -> Optional[ClassContext]:
        """The innermost class context if traversal is inside one of its methods."""
        context = self.current_class
        if context is None or context.method is None or context.qualifier is None:
            return None
        return context

    def visit_ClassDef(self, node: cst.ClassDef) -> bool:  # noqa: N802
        for decorator in node.decorators:
            decorator.visit(self)
        for arg in (*node.bases, *node.keywords):
            arg.visit(self)

        self._class_stack.append(ClassContext(node, resolve(node, self.catalog)))
        self.enter_class(self._class_stack[-1])
        for statement in node.body.body:
            statement.visit(self)
        self.leave_class(self._class_stack.pop())
        return False

    def visit_FunctionDef(self, node: cst.FunctionDef) -> bool:  # noqa: N802
        context = self.current_class
        if context is None or context.method is not None:
            # Module-level function, or a function nested inside a method
            return True

        context.method = node
        context.qualifier = qualifier_name(node)
        node.body.visit(self)
        context.method = None
        context.qualifier = None
        return False

    def enter_class(self, context: ClassContext) -> None:
        """Hook called before a class body is visited."""

    def leave_class(self, context: ClassContext) -> None:
        """Hook called after a class body is visited."""
