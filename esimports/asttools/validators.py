import ast
import collections

from ..nodes import (
    Program, ImportDefaultSpecifier,
    ImportNamespaceSpecifier, ImportSpecifier
)


class ESImportsError(Exception):
    pass


class ParseError(ESImportsError):
    pass


class SpecifierError(ESImportsError):
    pass


ClassifiedImport = collections.namedtuple(
    "ClassifiedImport", "statement source specifiers has_namespace"
)


def has_namespace_specifier(statement):
    """Whether an import declaration binds a namespace (``* as ns``)"""
    return any(isinstance(spec, ImportNamespaceSpecifier)
               for spec in statement.specifiers)


def default_local_name(specifiers):
    """Local name bound to the default export, or None if there is none.

    Parameters
    ----------
    specifiers : List[ModuleSpecifier]
        specifier list of one import declaration

    Returns
    -------
    Union[str, None] :
        the local name of the first default specifier
    """
    for spec in specifiers:
        if isinstance(spec, ImportDefaultSpecifier):
            return spec.local_name
    return None


class ImportCollector(ast.NodeVisitor):
    """Collect the top-level import declarations of a module in order.

    Only the statements of the module body are inspected; nothing nested in
    a statement is visited.
    """
    def __init__(self):
        super().__init__()
        self.imports = []

    def visit_Program(self, node):
        for statement in node.body:
            self.visit(statement)

    def visit_ImportDeclaration(self, node):
        self.imports.append(ClassifiedImport(
            statement=node,
            source=node.source.value,
            specifiers=node.specifiers,
            has_namespace=has_namespace_specifier(node)
        ))

    def generic_visit(self, node):
        pass


def classify_imports(tree):
    """Classify the import declarations of a module body.

    Parameters
    ----------
    tree : Union[Program, List[ast.AST]]
        the module, or its list of top-level statements

    Returns
    -------
    List[ClassifiedImport] :
        one entry per import declaration, in document order
    """
    collector = ImportCollector()
    if isinstance(tree, Program):
        collector.visit(tree)
    else:
        for statement in tree:
            collector.visit(statement)
    return collector.imports


def validate_specifiers(statement):
    """Check that the specifier list of a declaration is well formed.

    A well-formed list has at most one default specifier, which comes
    first, and either at most one namespace specifier or any number of
    named specifiers (but not both).

    Raises a SpecifierError if that is not the case.

    Parameters
    ----------
    statement : ImportDeclaration
        declaration to check

    Returns
    -------
    bool :
        True if valid; raises error if not
    """
    source = statement.source.value
    defaults = [idx for idx, spec in enumerate(statement.specifiers)
                if isinstance(spec, ImportDefaultSpecifier)]
    namespaces = [spec for spec in statement.specifiers
                  if isinstance(spec, ImportNamespaceSpecifier)]
    named = [spec for spec in statement.specifiers
             if isinstance(spec, ImportSpecifier)]

    if len(defaults) > 1:
        raise SpecifierError("Multiple default imports from " + source)
    if defaults and defaults[0] != 0:
        raise SpecifierError("Default import is not first in import from "
                             + source)
    if len(namespaces) > 1:
        raise SpecifierError("Multiple namespace imports from " + source)
    if namespaces and named:
        raise SpecifierError("Namespace import mixed with named imports "
                             "from " + source)
    if len(defaults) + len(namespaces) + len(named) \
            != len(statement.specifiers):
        raise SpecifierError("Unknown specifier in import from " + source)
    return True


def validate_program(tree):
    """Run :func:`validate_specifiers` on every import in a module."""
    for imp in classify_imports(tree):
        validate_specifiers(imp.statement)
    return True
