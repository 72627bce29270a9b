from .validators import (
    ESImportsError, ParseError, SpecifierError, ClassifiedImport,
    ImportCollector, classify_imports, has_namespace_specifier,
    default_local_name, validate_specifiers, validate_program
)
from .rewriters import canonicalize_specifiers, dedupe_imports
from .imports import validate_imports, import_names
