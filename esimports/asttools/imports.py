from ..nodes import (
    Program, RawStatement, ImportDefaultSpecifier, ImportNamespaceSpecifier
)
from ..parsing import parse_module
from .validators import classify_imports


def _parse(imports):
    if isinstance(imports, str):
        imports = [imports]
    return parse_module("\n".join(imports))


def validate_imports(imports):
    """Validate that the given list of imports only includes imports.

    Parameters
    ----------
    imports : list of str
        string that should be import statements
    """
    if isinstance(imports, str):
        imports = [imports]
    for line in imports:
        tree = _parse(line)
        for statement in tree.body:
            if isinstance(statement, RawStatement):
                raise RuntimeError("Non-import statement in imports: "
                                   + str(line))


def _imported_name(spec):
    """Take specifier node and return the export name it binds"""
    if isinstance(spec, ImportDefaultSpecifier):
        return 'default'
    elif isinstance(spec, ImportNamespaceSpecifier):
        return '*'
    return spec.imported_name


def import_names(imports):
    """Link local import names to the module exports they bind.

    Parameters
    ----------
    imports : Union[str, List[str], Program]
        lines of code representing imports, or an already parsed module

    Returns
    -------
    dict :
        mapping of local name to a ``(source, imported)`` tuple, where
        ``imported`` is ``'default'`` for default imports and ``'*'`` for
        namespace imports
    """
    if isinstance(imports, Program):
        tree = imports
    else:
        validate_imports(imports)
        tree = _parse(imports)

    names = {}
    for imp in classify_imports(tree):
        names.update({spec.local_name: (imp.source, _imported_name(spec))
                      for spec in imp.specifiers})
    return names
