"""Render :mod:`esimports.nodes` trees back to ES module source."""
import functools

import astor
from astor.code_gen import SourceGenerator

from .nodes import ImportSpecifier, StringLiteral


def quote_string(value, quote="'"):
    """Quote a string value for ES source."""
    escaped = value.replace('\\', '\\\\').replace(quote, '\\' + quote)
    return quote + escaped + quote


class ESSourceGenerator(SourceGenerator):
    """astor source generator for import declarations.

    Everything that isn't an import is a :class:`.RawStatement` and is
    written out as is. String literals are written with their original
    quotes when known, otherwise with ``quote``.
    """
    quote = "'"

    def _trailing_comment(self, node):
        if node.trailing_comment is not None:
            self.write(' ', node.trailing_comment)

    def visit_Program(self, node):
        self.write(*node.body)

    def visit_RawStatement(self, node):
        self.statement(node, node.code)
        self._trailing_comment(node)

    def visit_Identifier(self, node):
        self.write(node.name)

    def visit_StringLiteral(self, node):
        if node.raw is not None:
            self.write(node.raw)
        else:
            self.write(quote_string(node.value, self.quote))

    def visit_ImportDefaultSpecifier(self, node):
        self.write(node.local)

    def visit_ImportNamespaceSpecifier(self, node):
        self.write('* as ', node.local)

    def visit_ImportSpecifier(self, node):
        self.write(node.imported)
        # a string export name always needs a local alias
        if isinstance(node.imported, StringLiteral) \
                or node.imported_name != node.local_name:
            self.write(' as ', node.local)

    def visit_ImportDeclaration(self, node):
        # default/namespace bindings go bare, named ones inside the braces
        bare = [spec for spec in node.specifiers
                if not isinstance(spec, ImportSpecifier)]
        named = [spec for spec in node.specifiers
                 if isinstance(spec, ImportSpecifier)]
        self.statement(node, 'import ')
        for idx, spec in enumerate(bare):
            self.write(', ' if idx else '', spec)
        if named:
            self.write(', ' if bare else '', '{ ')
            for idx, spec in enumerate(named):
                self.write(', ' if idx else '', spec)
            self.write(' }')
        if node.specifiers:
            self.write(' from ')
        self.write(node.source, ';')
        self._trailing_comment(node)


@functools.lru_cache(maxsize=None)
def source_generator_class(quote="'"):
    """Generator class that quotes new string literals with ``quote``"""
    if quote == ESSourceGenerator.quote:
        return ESSourceGenerator
    return type('QuotedSourceGenerator', (ESSourceGenerator,), {'quote': quote})


def to_source(node, quote="'", indent_with=' ' * 4):
    """Generate ES source code from a tree.

    One statement is written per line. A statement's trailing comment is
    written after it on the same line; when a duplicate import is merged
    away, its trailing comment goes with it.

    Parameters
    ----------
    node : :class:`.Node`
        tree (usually a :class:`.Program`) to render
    quote : str
        quote character for string literals without original text
    indent_with : str
        indentation string, passed through to astor

    Returns
    -------
    str :
        the source code
    """
    generator_class = source_generator_class(quote)
    # astor's default line wrapping is Python-specific; keep lines as is
    return astor.to_source(node, indent_with=indent_with,
                           pretty_source=''.join,
                           source_generator_class=generator_class)
