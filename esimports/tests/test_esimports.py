import pytest

import esimports
from .asttools.modules_js import DEDUPE_CASES


@pytest.mark.parametrize("case", list(DEDUPE_CASES.keys()))
def test_dedupe_source(case):
    source, expected = DEDUPE_CASES[case]
    assert esimports.dedupe_source(source) == expected


def test_dedupe_source_quote():
    source = "import { a } from 'm';\nimport { b } from 'm';\n"
    # original quoting wins over the default quote
    assert esimports.dedupe_source(source, quote='"') \
            == "import { a, b } from 'm';\n"


def test_dedupe_source_parse_error():
    with pytest.raises(esimports.ParseError):
        esimports.dedupe_source("import { a from 'm';")


def test_dedupe_source_string_export_name_reparses():
    source = ("import { \"a-b\" as ab } from 'm';\n"
              "import { c } from 'm';\n")
    result = esimports.dedupe_source(source)
    assert esimports.import_names(esimports.parse_module(result)) == {
        'ab': ('m', 'a-b'),
        'c': ('m', 'c'),
    }


def test_version():
    assert esimports.version.version.startswith(
        esimports.version.short_version
    )
