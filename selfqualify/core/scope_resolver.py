"""Lexical scope lookups for deciding whether a name is locally bound.

ScopeResolver answers, for a node inside a method body, which enclosing scope
(if any) owns a binding for a given name. The walk goes outward from the
node's own scope through every enclosing function, lambda and comprehension,
including functions that enclose the class itself. Class scopes are skipped
and the module scope ends the walk, so class members, module globals and
builtins never count as local bindings.

The resolver is built once from libcst's ScopeProvider and is read-only
afterwards.
"""

from collections.abc import Iterator, Mapping
from typing import Optional

import libcst as cst
from libcst.metadata import ClassScope, GlobalScope, MetadataWrapper, Scope, ScopeProvider


class ScopeResolver:
    """Read-only view over the lexical scope tree of one parsed module.

    Example:
        wrapper = MetadataWrapper(cst.parse_module(code))
        resolver = ScopeResolver(wrapper)
        resolver.is_locally_bound(name_node, "total")
    """

    def __init__(self, wrapper: MetadataWrapper) -> None:
        """Initialize the resolver.

        Args:
            wrapper: Metadata wrapper around the module being rewritten. Nodes
                passed to the lookup methods must come from wrapper.module.
        """
        self._scopes: Mapping[cst.CSTNode, Optional[Scope]] = wrapper.resolve(ScopeProvider)
        self._declarations = self._collect_extra_bindings()

    def scope_of(self, node: cst.CSTNode) -> Optional[Scope]:
        """Get the innermost scope containing a node."""
        return self._scopes.get(node)

    def binding_scope(self, node: cst.CSTNode, name: str) -> Optional[Scope]:
        """Find the nearest non-module scope that binds a name.

        Class scopes are skipped because their names are not visible from
        nested functions.

        Args:
            node: The node where the name is used
            name: The identifier to look up

        Returns:
            The owning scope, or None if the name is free up to module level
        """
        scope = self._scopes.get(node)
        while scope is not None and not isinstance(scope, GlobalScope):
            if not isinstance(scope, ClassScope) and self._owns_binding(scope, name):
                return scope
            scope = scope.parent
        return None

    def is_locally_bound(self, node: cst.CSTNode, name: str) -> bool:
        """Check whether a name is shadowed by a local binding at node."""
        return self.binding_scope(node, name) is not None

    def binds_in(self, node: cst.CSTNode, name: str, owner: cst.CSTNode) -> bool:
        """Check that the nearest binding of name at node is the scope created by owner.

        Used to confirm that a method's self parameter is not rebound by a
        nested function, lambda or comprehension between owner and node.
        """
        scope = self.binding_scope(node, name)
        return scope is not None and getattr(scope, "node", None) is owner

    def _owns_binding(self, scope: Scope, name: str) -> bool:
        if name in scope.assignments:
            return True
        # global/nonlocal move the assignment to another scope, but the name
        # still does not refer to a class member here
        return name in self._declarations.get(scope, ())

    def _collect_extra_bindings(self) -> dict[Scope, set[str]]:
        """Names bound in a scope that ScopeProvider does not record as assignments.

        These are global/nonlocal declarations and match-pattern captures.
        """
        declarations: dict[Scope, set[str]] = {}
        for node, scope in self._scopes.items():
            if scope is None:
                continue
            names = set(_declared_names(node))
            if names:
                declarations.setdefault(scope, set()).update(names)
        return declarations


def _declared_names(node: cst.CSTNode) -> Iterator[str]:
    if isinstance(node, (cst.Global, cst.Nonlocal)):
        for item in node.names:
            yield item.name.value
    elif isinstance(node, (cst.MatchAs, cst.MatchStar)):
        # case x: / case [*rest]: / case P() as x:
        if node.name is not None:
            yield node.name.value
    elif isinstance(node, cst.MatchMapping):
        if node.rest is not None:
            yield node.rest.value
