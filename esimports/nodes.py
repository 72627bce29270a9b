"""Node classes for ECMAScript module syntax.

These follow the ESTree/Babel naming. They subclass :class:`ast.AST` so
that the standard :class:`ast.NodeVisitor` machinery (``generic_visit``,
``iter_fields``, ``walk``) works on them unchanged.
"""
import ast


class Node(ast.AST):
    _fields = ()
    _attributes = ()


class Program(Node):
    """Root of one module: an ordered list of top-level statements."""
    _fields = ('body',)

    def __init__(self, body=None):
        self.body = list(body) if body is not None else []


class Identifier(Node):
    _fields = ('name',)

    def __init__(self, name):
        self.name = name


class StringLiteral(Node):
    """String literal; ``raw`` keeps the quoted text as written, if known."""
    _fields = ('value',)

    def __init__(self, value, raw=None):
        self.value = value
        self.raw = raw


class RawStatement(Node):
    """Any statement we don't model; carried through as its source text."""
    _fields = ('code',)

    def __init__(self, code, trailing_comment=None):
        self.code = code
        self.trailing_comment = trailing_comment


class ImportDeclaration(Node):
    """``import <specifiers> from <source>``

    An empty specifier list is a side-effect import, ``import 'mod';``.
    ``trailing_comment`` is a comment written after the statement on the
    same line (``import { a } from 'm'; // eslint-disable-line``).
    """
    _fields = ('specifiers', 'source')

    def __init__(self, specifiers, source, trailing_comment=None):
        self.specifiers = list(specifiers)
        if isinstance(source, str):
            source = StringLiteral(source)
        self.source = source
        self.trailing_comment = trailing_comment


### SPECIFIERS ###########################################################

class ModuleSpecifier(Node):
    _fields = ('local',)

    def __init__(self, local):
        if isinstance(local, str):
            local = Identifier(local)
        self.local = local

    @property
    def local_name(self):
        return self.local.name


class ImportDefaultSpecifier(ModuleSpecifier):
    """``import local from 'mod'``"""


class ImportNamespaceSpecifier(ModuleSpecifier):
    """``import * as local from 'mod'``"""


class ImportSpecifier(ModuleSpecifier):
    """``import { imported as local } from 'mod'``

    ``imported`` is an :class:`.Identifier`, or a :class:`.StringLiteral` for
    export names that aren't identifiers (``import { "a-b" as ab }``).
    """
    _fields = ('imported', 'local')

    def __init__(self, imported, local=None):
        if isinstance(imported, str):
            imported = Identifier(imported)
        self.imported = imported
        if local is None:
            local = self.imported_name
        super().__init__(local)

    @property
    def imported_name(self):
        if isinstance(self.imported, StringLiteral):
            return self.imported.value
        return self.imported.name


def specifier_key(specifier):
    """Hashable description of the binding a specifier creates.

    Two specifiers with the same key bind the same local name to the same
    export of a module.
    """
    if isinstance(specifier, ImportSpecifier):
        return ('named', specifier.imported_name, specifier.local_name)
    elif isinstance(specifier, ImportDefaultSpecifier):
        return ('default', 'default', specifier.local_name)
    elif isinstance(specifier, ImportNamespaceSpecifier):
        return ('namespace', '*', specifier.local_name)
    else:
        raise TypeError("Not an import specifier: " + repr(specifier))
