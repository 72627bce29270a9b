from logging import getLogger

from ..nodes import Program, ImportDefaultSpecifier, specifier_key
from .validators import classify_imports, default_local_name

logger = getLogger(__name__)

### SPECIFIER ORDER ######################################################

def canonicalize_specifiers(specifiers):
    """Put default specifiers ahead of all other specifiers.

    This is a stable partition: the relative order within the defaults and
    within the remaining specifiers is unchanged. Code generation needs the
    default first in order to emit valid syntax.

    Parameters
    ----------
    specifiers : List[ModuleSpecifier]
        specifiers of one import declaration

    Returns
    -------
    List[ModuleSpecifier] :
        new list with the same specifiers, defaults first
    """
    defaults = []
    others = []
    for spec in specifiers:
        if isinstance(spec, ImportDefaultSpecifier):
            defaults.append(spec)
        else:
            others.append(spec)
    return defaults + others

### IMPORT DEDUPLICATION #################################################

def _merge_into(keeper, duplicate):
    """Fold the specifiers of ``duplicate`` into ``keeper``.

    Returns whether ``duplicate`` can be removed from the module afterwards.
    It can't when it binds the default export under a different name than
    the keeper does; its other specifiers are merged regardless.
    """
    existing_default = default_local_name(keeper.specifiers)
    known = set(specifier_key(spec) for spec in keeper.specifiers)
    source = keeper.source.value
    removable = True
    for spec in duplicate.specifiers:
        if existing_default and isinstance(spec, ImportDefaultSpecifier):
            if spec.local_name != existing_default:
                logger.debug("Default import '%s' from '%s' conflicts "
                             "with '%s'; keeping statement",
                             spec.local_name, source, existing_default)
                removable = False
        elif specifier_key(spec) in known:
            pass  # the keeper already has this exact binding
        else:
            keeper.specifiers.append(spec)
            known.add(specifier_key(spec))

    keeper.specifiers[:] = canonicalize_specifiers(keeper.specifiers)
    return removable


def dedupe_imports(tree):
    """Merge import declarations that share a source into the first one.

    The module is changed in place: later duplicates are removed from the
    body and their specifiers are appended to the first declaration from
    the same source. Declarations with a namespace specifier
    (``import * as ns``) never take part in merging. A duplicate binding
    the default export to a different local name than the first
    declaration stays in the module (its other specifiers still move).

    Parameters
    ----------
    tree : Union[Program, List[ast.AST]]
        the module, or its list of top-level statements
    """
    body = tree.body if isinstance(tree, Program) else tree
    keep_by_source = {}
    to_remove = set([])
    for imp in classify_imports(body):
        if imp.has_namespace:
            continue

        keeper = keep_by_source.get(imp.source)
        if keeper is None:
            keep_by_source[imp.source] = imp.statement
            continue

        if _merge_into(keeper, imp.statement):
            logger.debug("Merged duplicate import from '%s'", imp.source)
            to_remove.add(id(imp.statement))

    if to_remove:
        body[:] = [stmt for stmt in body if id(stmt) not in to_remove]
