import pytest

from esimports.nodes import *
from esimports.parsing import parse_module
from esimports.codegen import (
    ESSourceGenerator, to_source, quote_string, source_generator_class
)


@pytest.mark.parametrize("specifiers, expected_code", [
    ([ImportDefaultSpecifier('D')], "import D from 'm';"),
    ([ImportNamespaceSpecifier('ns')], "import * as ns from 'm';"),
    ([ImportDefaultSpecifier('D'), ImportNamespaceSpecifier('ns')],
     "import D, * as ns from 'm';"),
    ([ImportSpecifier('a'), ImportSpecifier('b', 'c')],
     "import { a, b as c } from 'm';"),
    ([ImportDefaultSpecifier('D'), ImportSpecifier('a')],
     "import D, { a } from 'm';"),
    ([], "import 'm';"),
])
def test_to_source_import(specifiers, expected_code):
    tree = ImportDeclaration(specifiers, 'm')
    assert to_source(tree) == expected_code + '\n'


def test_to_source_program():
    tree = Program([
        RawStatement("const x = 1;"),
        ImportDeclaration([ImportSpecifier('a')], 'm'),
        RawStatement("foo(x);"),
    ])
    assert to_source(tree) == ("const x = 1;\n"
                               "import { a } from 'm';\n"
                               "foo(x);\n")


def test_to_source_empty():
    assert to_source(Program()) == ''


def test_to_source_quote():
    tree = ImportDeclaration([ImportDefaultSpecifier('D')], 'm')
    assert to_source(tree, quote='"') == 'import D from "m";\n'


def test_to_source_keeps_original_quotes():
    tree = parse_module('import D from "m";\nimport { a } from \'n\';')
    assert to_source(tree) == 'import D from "m";\nimport { a } from \'n\';\n'


@pytest.mark.parametrize("value, quote, expected", [
    ("m", "'", "'m'"),
    ("it's", "'", "'it\\'s'"),
    ("it's", '"', '"it\'s"'),
    ("a\\b", "'", "'a\\\\b'"),
])
def test_quote_string(value, quote, expected):
    assert quote_string(value, quote) == expected


@pytest.mark.parametrize("specifier, expected_code", [
    (ImportSpecifier(StringLiteral('a-b'), 'ab'),
     "import { 'a-b' as ab } from 'm';"),
    (ImportSpecifier(StringLiteral('a', raw='"a"'), 'a'),
     "import { \"a\" as a } from 'm';"),
])
def test_to_source_string_export_name(specifier, expected_code):
    tree = ImportDeclaration([specifier], 'm')
    assert to_source(tree) == expected_code + '\n'


def test_to_source_string_export_name_reparses():
    source = "import { \"a-b\" as ab, c } from 'm';\n"
    assert to_source(parse_module(source)) == source
    assert to_source(parse_module(to_source(parse_module(source)))) \
            == source


def test_to_source_trailing_comment():
    tree = Program([
        ImportDeclaration([ImportSpecifier('a')], 'm',
                          trailing_comment="// keep"),
        RawStatement("foo();", trailing_comment="/* x */"),
    ])
    assert to_source(tree) == ("import { a } from 'm'; // keep\n"
                               "foo(); /* x */\n")


def test_source_generator_class():
    assert source_generator_class("'") is ESSourceGenerator
    double = source_generator_class('"')
    assert issubclass(double, ESSourceGenerator)
    assert double.quote == '"'
    assert source_generator_class('"') is double
