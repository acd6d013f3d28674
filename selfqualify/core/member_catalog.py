"""Class member catalog.

Collects, for every class in one or more parsed modules, the names the class
body declares directly: methods, nested classes and class-level assignment
targets. The result is an immutable ClassCatalog keyed by class name.

Example:
    module = cst.parse_module('''
class Account:
    balance = 0
    def deposit(self, amount):
        pass
''')
    catalog = build_catalog(module)
    catalog.members("Account")  # frozenset({"balance", "deposit"})
"""

from collections.abc import Iterator, Mapping, Sequence

import libcst as cst

MemberSet = frozenset[str]


class ClassCatalog(Mapping[str, MemberSet]):
    """Immutable mapping from class name to the member names it declares."""

    def __init__(self, entries: Mapping[str, MemberSet] | None = None) -> None:
        self._entries: dict[str, MemberSet] = dict(entries or {})

    def __getitem__(self, class_name: str) -> MemberSet:
        return self._entries[class_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ClassCatalog({self._entries!r})"

    def members(self, class_name: str) -> MemberSet:
        """Get the members declared by a class, or an empty set if it is unknown."""
        return self._entries.get(class_name, frozenset())

    def merged(self, other: "ClassCatalog") -> "ClassCatalog":
        """Return a new catalog where entries of other replace same-named entries."""
        return ClassCatalog({**self._entries, **other._entries})


class ClassMemberCollector(cst.CSTVisitor):
    """Records the own members of every ClassDef in a tree, at any depth."""

    def __init__(self) -> None:
        self.entries: dict[str, MemberSet] = {}

    def visit_ClassDef(self, node: cst.ClassDef) -> bool:  # noqa: N802
        self.entries[node.name.value] = class_members(node)
        return True


def build_catalog(*modules: cst.Module) -> ClassCatalog:
    """Build one catalog over several modules.

    Modules are scanned in order, so a class declared in a later module replaces
    a same-named class from an earlier one.

    Args:
        *modules: Parsed modules, context modules first and the target last

    Returns:
        The merged ClassCatalog
    """
    collector = ClassMemberCollector()
    for module in modules:
        module.visit(collector)
    return ClassCatalog(collector.entries)


def class_members(class_def: cst.ClassDef) -> MemberSet:
    """Get the names declared directly in a class body.

    Statements inside class-level if/try/with/for/while blocks belong to the
    body, as do for, with-as and except-as targets and imported names. Method bodies
    and nested class bodies do not. Targets that are not plain names
    (subscripts, attributes) are skipped.

    Args:
        class_def: The class definition to inspect

    Returns:
        Frozen set of member names
    """
    names: set[str] = set()
    _collect_statements(class_def.body.body, names)
    return frozenset(names)


def _collect_statements(statements: Sequence[cst.CSTNode], names: set[str]) -> None:
    for stmt in statements:
        if isinstance(stmt, (cst.FunctionDef, cst.ClassDef)):
            names.add(stmt.name.value)
        elif isinstance(stmt, cst.SimpleStatementLine):
            _collect_statements(stmt.body, names)
        elif isinstance(stmt, cst.Assign):
            for assign_target in stmt.targets:
                _collect_target(assign_target.target, names)
        elif isinstance(stmt, (cst.AnnAssign, cst.AugAssign)):
            _collect_target(stmt.target, names)
        elif isinstance(stmt, (cst.Import, cst.ImportFrom)):
            _collect_imported(stmt, names)
        else:
            if isinstance(stmt, cst.For):
                _collect_target(stmt.target, names)
            elif isinstance(stmt, cst.With):
                for item in stmt.items:
                    if item.asname is not None:
                        _collect_target(item.asname.name, names)
            elif isinstance(stmt, (cst.Try, cst.TryStar)):
                for handler in stmt.handlers:
                    if handler.name is not None:
                        _collect_target(handler.name.name, names)
            for suite in _nested_suites(stmt):
                _collect_statements(suite.body, names)


def _collect_target(target: cst.BaseExpression, names: set[str]) -> None:
    if isinstance(target, cst.Name):
        names.add(target.value)
    elif isinstance(target, (cst.Tuple, cst.List)):
        for element in target.elements:
            _collect_target(element.value, names)


def _collect_imported(stmt: cst.Import | cst.ImportFrom, names: set[str]) -> None:
    if isinstance(stmt.names, cst.ImportStar):
        return
    for alias in stmt.names:
        if alias.asname is not None:
            _collect_target(alias.asname.name, names)
        else:
            # import a.b binds a
            names.add(alias.evaluated_name.split(".")[0])


def _nested_suites(stmt: cst.CSTNode) -> list[cst.BaseSuite]:
    """Get the blocks of a class-level compound statement that share the class scope."""
    if isinstance(stmt, cst.If):
        suites = [stmt.body]
        if isinstance(stmt.orelse, cst.If):
            suites.extend(_nested_suites(stmt.orelse))
        elif stmt.orelse is not None:
            suites.append(stmt.orelse.body)
        return suites
    if isinstance(stmt, (cst.Try, cst.TryStar)):
        suites = [stmt.body]
        suites.extend(handler.body for handler in stmt.handlers)
        if stmt.orelse is not None:
            suites.append(stmt.orelse.body)
        if stmt.finalbody is not None:
            suites.append(stmt.finalbody.body)
        return suites
    if isinstance(stmt, (cst.For, cst.While)):
        suites = [stmt.body]
        if stmt.orelse is not None:
            suites.append(stmt.orelse.body)
        return suites
    if isinstance(stmt, cst.With):
        return [stmt.body]
    return []
