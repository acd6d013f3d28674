"""Entry points that run the whole rewrite over source strings.

Both functions are pure: they parse the inputs, build one class catalog over
context and target, rewrite the target's method bodies and return the printed
module. Nothing is cached between calls and no I/O is performed.
"""

import logging
from collections.abc import Sequence
from typing import Callable, Union

import libcst as cst
from libcst.metadata import MetadataWrapper

from selfqualify.core.errors import ParseError
from selfqualify.core.member_catalog import ClassCatalog, build_catalog
from selfqualify.core.reference_rewriter import qualify_module, unqualify_module

log = logging.getLogger(__name__)

ContextSource = Union[str, Sequence[str]]
ModuleRewrite = Callable[[MetadataWrapper, ClassCatalog], cst.Module]


def add_qualifiers(context_source: ContextSource, target_source: str) -> str:
    """Prefix bare references to class members with the method's self qualifier.

    Args:
        context_source: Source (or list of sources, one per file) declaring
            classes that target classes may inherit from
        target_source: Source to rewrite

    Returns:
        The rewritten target source

    Raises:
        ParseError: If any input is not valid Python
    """
    return _rewrite(context_source, target_source, qualify_module)


def remove_qualifiers(context_source: ContextSource, target_source: str) -> str:
    """Strip the self qualifier from accesses to class members where it is redundant.

    Args:
        context_source: Source (or list of sources, one per file) declaring
            classes that target classes may inherit from
        target_source: Source to rewrite

    Returns:
        The rewritten target source

    Raises:
        ParseError: If any input is not valid Python
    """
    return _rewrite(context_source, target_source, unqualify_module)


def parse_source(source: str, label: str) -> cst.Module:
    """Parse source into a libcst module.

    Args:
        source: Python source code
        label: Name of the input used in error messages

    Raises:
        ParseError: If the source is not valid Python
    """
    try:
        return cst.parse_module(source)
    except cst.ParserSyntaxError as e:
        raise ParseError(label, e) from e


def _rewrite(context_source: ContextSource, target_source: str, rewrite: ModuleRewrite) -> str:
    if isinstance(context_source, str):
        context_source = [context_source]
    context_modules = [
        parse_source(source, f"context #{index}")
        for index, source in enumerate(context_source, start=1)
    ]
    wrapper = MetadataWrapper(parse_source(target_source, "target"))

    catalog = build_catalog(*context_modules, wrapper.module)
    log.debug("Catalog holds %d class(es): %s", len(catalog), ", ".join(sorted(catalog)))

    return rewrite(wrapper, catalog).code
