"""Front end: ES module source text to :mod:`esimports.nodes` trees.

Parsing is done by tree-sitter with the JavaScript grammar. Only import
declarations are converted to structured nodes; every other top-level node
is kept as a :class:`.RawStatement` with its exact source text.
"""
from logging import getLogger

import tree_sitter_javascript
from tree_sitter import Language, Parser

from .nodes import (
    Program, Identifier, StringLiteral, RawStatement, ImportDeclaration,
    ImportDefaultSpecifier, ImportNamespaceSpecifier, ImportSpecifier
)
from .asttools.validators import ParseError

logger = getLogger(__name__)

JS_LANGUAGE = Language(tree_sitter_javascript.language())

# import attributes (``with { type: 'json' }``) change what gets loaded, so
# those declarations are never treated as plain imports
_ATTRIBUTE_NODES = {'import_attribute', 'import_assertion'}


def _text(node):
    return node.text.decode('utf-8')


def _string_literal(node):
    raw = _text(node)
    return StringLiteral(raw[1:-1], raw=raw)


def _export_name(node):
    # ``import { "a-b" as ab }`` uses a string as the export name
    if node.type == 'string':
        return _string_literal(node)
    return Identifier(_text(node))


def _convert_named_imports(node):
    specifiers = []
    for child in node.named_children:
        if child.type != 'import_specifier':
            continue  # comments
        name = child.child_by_field_name('name')
        alias = child.child_by_field_name('alias')
        local = Identifier(_text(alias)) if alias is not None else None
        specifiers.append(ImportSpecifier(_export_name(name), local))
    return specifiers


def _convert_import_clause(node):
    specifiers = []
    for child in node.named_children:
        if child.type == 'identifier':
            specifiers.append(ImportDefaultSpecifier(Identifier(_text(child))))
        elif child.type == 'namespace_import':
            local = [c for c in child.named_children
                     if c.type == 'identifier'][0]
            specifiers.append(
                ImportNamespaceSpecifier(Identifier(_text(local))))
        elif child.type == 'named_imports':
            specifiers.extend(_convert_named_imports(child))
    return specifiers


def _convert_import(node):
    child_types = set(child.type for child in node.children)
    if child_types & _ATTRIBUTE_NODES:
        logger.debug("Import with attributes kept verbatim: %s", _text(node))
        return RawStatement(_text(node))

    specifiers = []
    for child in node.children:
        if child.type == 'import_clause':
            specifiers.extend(_convert_import_clause(child))

    source = node.child_by_field_name('source')
    return ImportDeclaration(specifiers, _string_literal(source))


def _convert_statement(node):
    if node.type == 'import_statement':
        return _convert_import(node)
    return RawStatement(_text(node))


def parse_module(source):
    """Parse the source of an ES module.

    Parameters
    ----------
    source : Union[str, bytes]
        module source code

    Returns
    -------
    :class:`.Program` :
        tree with one node per top-level statement (or comment); a comment
        on the same line as the statement before it is attached to that
        statement as its ``trailing_comment``
    """
    if isinstance(source, str):
        source = source.encode('utf-8')
    parser = Parser(JS_LANGUAGE)
    tree = parser.parse(source)
    root = tree.root_node
    if root.has_error:
        raise ParseError("Unable to parse module source: "
                         + source.decode('utf-8', errors='replace'))
    body = []
    previous = None
    for child in root.children:
        if (child.type == 'comment' and previous is not None
                and previous.end_point[0] == child.start_point[0]
                and body[-1].trailing_comment is None):
            # same line as the statement before it
            body[-1].trailing_comment = _text(child)
        else:
            body.append(_convert_statement(child))
        previous = child
    return Program(body)
