from . import version

from . import nodes
from . import asttools

from .nodes import (
    Program, Identifier, StringLiteral, RawStatement, ImportDeclaration,
    ImportDefaultSpecifier, ImportNamespaceSpecifier, ImportSpecifier
)
from .asttools import (
    ESImportsError, ParseError, SpecifierError, classify_imports,
    canonicalize_specifiers, dedupe_imports, validate_imports,
    import_names, validate_program
)
from .parsing import parse_module
from .codegen import to_source


def dedupe_source(source, quote="'"):
    """Merge duplicate imports in ES module source code.

    Parameters
    ----------
    source : str
        module source code
    quote : str
        quote character for string literals without original text

    Returns
    -------
    str :
        source with one statement per line and duplicate imports merged
    """
    tree = parse_module(source)
    dedupe_imports(tree)
    return to_source(tree, quote=quote)
