"""Module-scope name collection over a parsed Python syntax tree.

The collector walks top-level statements once and keeps a running set of
names bound at module scope. It is deliberately approximate: branch tests are
never evaluated, unreachable code is still visited, and star imports are
skipped. Function, class, comprehension, and exception-capture scopes are
never entered, so their bindings cannot leak into the result.
"""

from __future__ import annotations

import ast
from collections.abc import Iterable

STAR_IMPORT = "*"


class NameCollector:
    """Tracks the names a module binds while its statements run top-to-bottom."""

    def __init__(self) -> None:
        """Start with an empty name set."""
        self.names: set[str] = set()

    def add_statements(self, statements: Iterable[ast.stmt]) -> None:
        """Apply each statement in order."""
        for statement in statements:
            self.add_statement(statement)

    def add_statement(self, statement: ast.stmt) -> None:
        """Apply one statement's effect on the module-scope name set."""
        if isinstance(statement, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            self.names.add(statement.name)
        elif isinstance(statement, ast.Delete):
            for target in statement.targets:
                self.names.difference_update(resolve_target(target))
        elif isinstance(statement, ast.Assign):
            for target in statement.targets:
                self.names.update(resolve_target(target))
        elif isinstance(statement, (ast.AugAssign, ast.AnnAssign)):
            self.names.update(resolve_target(statement.target))
        elif isinstance(statement, (ast.For, ast.AsyncFor)):
            self.names.update(resolve_target(statement.target))
            self.add_statements(statement.body)
            self.add_statements(statement.orelse)
        elif isinstance(statement, (ast.While, ast.If)):
            # elif chains arrive as a nested If inside orelse
            if isinstance(statement.test, ast.NamedExpr):
                self.names.update(resolve_target(statement.test.target))
            self.add_statements(statement.body)
            self.add_statements(statement.orelse)
        elif isinstance(statement, (ast.With, ast.AsyncWith)):
            for item in statement.items:
                if item.optional_vars is not None:
                    self.names.update(resolve_target(item.optional_vars))
            self.add_statements(statement.body)
        elif isinstance(statement, (ast.Try, ast.TryStar)):
            self.add_statements(statement.body)
            for handler in statement.handlers:
                self.add_statements(handler.body)
            self.add_statements(statement.orelse)
            self.add_statements(statement.finalbody)
        elif isinstance(statement, (ast.Import, ast.ImportFrom)):
            self.names.update(imported_names(statement.names))


def resolve_target(target: ast.expr) -> set[str]:
    """Return the names an assignment-like target binds.

    Starred elements resolve through their value, so `a, *rest = ...` binds `rest`.
    """
    if isinstance(target, ast.Name):
        return {target.id}
    if isinstance(target, (ast.Tuple, ast.List)):
        names: set[str] = set()
        for element in target.elts:
            names.update(resolve_target(element))
        return names
    if isinstance(target, ast.Starred):
        return resolve_target(target.value)
    return set()


def imported_names(aliases: Iterable[ast.alias]) -> set[str]:
    """Return the names bound by an import's symbol list, ignoring ``*``.

    Unaliased dotted imports bind their first component, not the full symbol.
    """
    names: set[str] = set()
    for alias in aliases:
        if alias.name == STAR_IMPORT:
            continue
        if alias.asname is not None:
            names.add(alias.asname)
        else:
            # `import a.b.c` binds `a`
            names.add(alias.name.partition(".")[0])
    return names


def collect_names(source: ast.Module | Iterable[ast.stmt]) -> set[str]:
    """Collect module-scope names from a parsed module or a statement list."""
    statements = source.body if isinstance(source, ast.Module) else source
    collector = NameCollector()
    collector.add_statements(statements)
    return collector.names


__all__ = [
    "NameCollector",
    "resolve_target",
    "imported_names",
    "collect_names",
]
