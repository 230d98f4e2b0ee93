from engines.declension import (
    DeclensionCache,
    DeclensionResolver,
    DeclensionSource,
    IrregularSource,
    PrimaryTableSource,
    RuleBasedSource,
    SecondaryWikitextSource,
    build_resolver,
    default_sources,
)

__all__ = [
    "DeclensionCache",
    "DeclensionResolver",
    "DeclensionSource",
    "IrregularSource",
    "PrimaryTableSource",
    "RuleBasedSource",
    "SecondaryWikitextSource",
    "build_resolver",
    "default_sources",
]
