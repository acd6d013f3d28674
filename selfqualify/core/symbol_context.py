"""Symbol context types for telling identifier references from other name positions.

libcst uses cst.Name for every identifier in the tree, including attribute
names, keyword argument names and declaration keys. Only some of those are
references to a variable. SymbolContext names each position, and
classify_name maps a Name to its context from its parent node.
"""

from enum import Enum
from typing import Optional

import libcst as cst
from libcst.metadata import ExpressionContext


class SymbolContext(Enum):
    """Enumeration of the positions a cst.Name can occupy."""

    REFERENCE = "ref"  # x, x(), x[0]
    ATTRIBUTE_NAME = "attr"  # obj.x
    KEYWORD_ARGUMENT = "kwarg"  # f(x=1)
    DECLARATION = "decl"  # def x(): / class x:
    PARAMETER = "param"  # def f(x):
    IMPORT = "import"  # import x / from m import x
    SCOPE_DECLARATION = "scope"  # global x / nonlocal x
    PATTERN_KEY = "pattern"  # case Point(x=0):
    ASSIGNMENT_TARGET = "assign"  # x = value
    DELETE_TARGET = "del"  # del x


def classify_name(
    node: cst.Name,
    parent: Optional[cst.CSTNode],
    expression_context: Optional[ExpressionContext],
) -> SymbolContext:
    """Classify a Name by the position it occupies.

    Args:
        node: The name to classify
        parent: The node's parent (from ParentNodeProvider)
        expression_context: LOAD/STORE/DEL from ExpressionContextProvider, if any

    Returns:
        The SymbolContext of the name
    """
    if isinstance(parent, cst.Attribute) and parent.attr is node:
        return SymbolContext.ATTRIBUTE_NAME
    if isinstance(parent, cst.Arg) and parent.keyword is node:
        return SymbolContext.KEYWORD_ARGUMENT
    if isinstance(parent, (cst.FunctionDef, cst.ClassDef, cst.TypeAlias)) and parent.name is node:
        return SymbolContext.DECLARATION
    if isinstance(parent, (cst.TypeVar, cst.TypeVarTuple, cst.ParamSpec)):
        return SymbolContext.DECLARATION
    if isinstance(parent, cst.Param) and parent.name is node:
        return SymbolContext.PARAMETER
    if isinstance(parent, (cst.ImportAlias, cst.ImportFrom)):
        return SymbolContext.IMPORT
    if isinstance(parent, (cst.AsName, cst.MatchAs, cst.MatchStar)):
        return SymbolContext.ASSIGNMENT_TARGET
    if isinstance(parent, cst.NameItem):
        return SymbolContext.SCOPE_DECLARATION
    if isinstance(parent, cst.MatchKeywordElement) and parent.key is node:
        return SymbolContext.PATTERN_KEY
    if expression_context is ExpressionContext.STORE:
        return SymbolContext.ASSIGNMENT_TARGET
    if expression_context is ExpressionContext.DEL:
        return SymbolContext.DELETE_TARGET
    return SymbolContext.REFERENCE
