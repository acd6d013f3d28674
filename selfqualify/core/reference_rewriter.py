"""Insert or strip self qualifiers on references to class members.

Rewriting happens in two steps. A read-only collector walks the tree with
scope, parent and expression-context metadata and records the nodes to
change. A transformer then replaces exactly those nodes in a single pass.

Example:
    wrapper = MetadataWrapper(cst.parse_module(code))
    catalog = build_catalog(wrapper.module)
    updated = qualify_module(wrapper, catalog)
    print(updated.code)
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import libcst as cst
from libcst.metadata import (
    ExpressionContext,
    ExpressionContextProvider,
    MetadataWrapper,
    ParentNodeProvider,
)

from selfqualify.core.class_aware_visitor import ClassAwareVisitor, ClassContext
from selfqualify.core.member_catalog import ClassCatalog
from selfqualify.core.scope_resolver import ScopeResolver
from selfqualify.core.symbol_context import SymbolContext, classify_name

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeMetadata:
    """Metadata resolved once for the module being rewritten."""

    parents: Mapping[cst.CSTNode, cst.CSTNode]
    expression_contexts: Mapping[cst.CSTNode, ExpressionContext]
    scopes: ScopeResolver

    @classmethod
    def from_wrapper(cls, wrapper: MetadataWrapper) -> "TreeMetadata":
        return cls(
            parents=wrapper.resolve(ParentNodeProvider),
            expression_contexts=wrapper.resolve(ExpressionContextProvider),
            scopes=ScopeResolver(wrapper),
        )


class _ReferenceCollector(ClassAwareVisitor):
    """Shared checks for both rewrite directions.

    Candidates are keyed by id() because libcst nodes are compared by identity
    and the transformer sees the same node objects as the collector.
    """

    def __init__(self, catalog: ClassCatalog, metadata: TreeMetadata) -> None:
        super().__init__(catalog)
        self.metadata = metadata
        self.candidates: dict[int, str] = {}
        self._class_counts: list[int] = []

    def visit_Import(self, node: cst.Import) -> bool:  # noqa: N802
        return False

    def visit_ImportFrom(self, node: cst.ImportFrom) -> bool:  # noqa: N802
        return False

    def visit_Global(self, node: cst.Global) -> bool:  # noqa: N802
        return False

    def visit_Nonlocal(self, node: cst.Nonlocal) -> bool:  # noqa: N802
        return False

    def enter_class(self, context: ClassContext) -> None:
        self._class_counts.append(len(self.candidates))

    def leave_class(self, context: ClassContext) -> None:
        found = len(self.candidates) - self._class_counts.pop()
        log.debug(
            "Class %s: %d effective members, %d candidate(s)",
            context.class_def.name.value,
            len(context.members),
            found,
        )

    def _is_free_member(self, node: cst.CSTNode, name: str, context: ClassContext) -> bool:
        """Check that name is a member, not shadowed, and the qualifier still means self."""
        qualifier = context.qualifier
        if name not in context.members or name == qualifier:
            return False
        scopes = self.metadata.scopes
        if scopes.is_locally_bound(node, name):
            return False
        return scopes.binds_in(node, qualifier, context.method)


class UnqualifiedReferenceCollector(_ReferenceCollector):
    """Collects bare member references that need a qualifier."""

    def visit_Name(self, node: cst.Name) -> None:  # noqa: N802
        context = self.current_method
        if context is None:
            return
        symbol_context = classify_name(
            node,
            self.metadata.parents.get(node),
            self.metadata.expression_contexts.get(node),
        )
        if symbol_context is not SymbolContext.REFERENCE:
            return
        if self._is_free_member(node, node.value, context):
            self.candidates[id(node)] = context.qualifier


class QualifiedReferenceCollector(_ReferenceCollector):
    """Collects qualified member accesses whose qualifier is redundant."""

    def visit_Attribute(self, node: cst.Attribute) -> None:  # noqa: N802
        context = self.current_method
        if context is None:
            return
        if not isinstance(node.value, cst.Name) or node.value.value != context.qualifier:
            return
        if self.metadata.expression_contexts.get(node) in (
            ExpressionContext.STORE,
            ExpressionContext.DEL,
        ):
            # Stripping the qualifier from a target would create a local
            return
        if self._is_free_member(node, node.attr.value, context):
            self.candidates[id(node)] = node.attr.value


class QualifierInserter(cst.CSTTransformer):
    """Replaces collected bare names with qualified attribute accesses."""

    def __init__(self, candidates: Mapping[int, str]) -> None:
        self.candidates = candidates

    def leave_Name(  # noqa: N802
        self, original_node: cst.Name, updated_node: cst.Name
    ) -> cst.BaseExpression:
        qualifier = self.candidates.get(id(original_node))
        if qualifier is None:
            return updated_node
        return cst.Attribute(
            value=cst.Name(qualifier),
            attr=updated_node.with_changes(lpar=(), rpar=()),
            lpar=updated_node.lpar,
            rpar=updated_node.rpar,
        )


class QualifierRemover(cst.CSTTransformer):
    """Replaces collected qualified accesses with bare names."""

    def __init__(self, candidates: Mapping[int, str]) -> None:
        self.candidates = candidates

    def leave_Attribute(  # noqa: N802
        self, original_node: cst.Attribute, updated_node: cst.Attribute
    ) -> cst.BaseExpression:
        if id(original_node) not in self.candidates:
            return updated_node
        return updated_node.attr.with_changes(lpar=updated_node.lpar, rpar=updated_node.rpar)


def qualify_module(wrapper: MetadataWrapper, catalog: ClassCatalog) -> cst.Module:
    """Add qualifiers to every free bare member reference in the module's classes.

    Args:
        wrapper: Metadata wrapper around the target module
        catalog: Merged catalog of context and target classes

    Returns:
        The rewritten module
    """
    collector = UnqualifiedReferenceCollector(catalog, TreeMetadata.from_wrapper(wrapper))
    wrapper.module.visit(collector)
    log.debug("Qualifying %d reference(s)", len(collector.candidates))
    return wrapper.module.visit(QualifierInserter(collector.candidates))


def unqualify_module(wrapper: MetadataWrapper, catalog: ClassCatalog) -> cst.Module:
    """Strip redundant qualifiers from member accesses in the module's classes.

    Args:
        wrapper: Metadata wrapper around the target module
        catalog: Merged catalog of context and target classes

    Returns:
        The rewritten module
    """
    collector = QualifiedReferenceCollector(catalog, TreeMetadata.from_wrapper(wrapper))
    wrapper.module.visit(collector)
    log.debug("Unqualifying %d reference(s)", len(collector.candidates))
    return wrapper.module.visit(QualifierRemover(collector.candidates))
