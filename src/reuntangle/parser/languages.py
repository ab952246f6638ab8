"""tree-sitter grammar selection per file extension."""

from __future__ import annotations

from functools import cache

from tree_sitter import Language, Parser

TYPESCRIPT_EXTENSIONS = frozenset({".ts", ".tsx"})


@cache
def _language(name: str) -> Language:
    if name == "javascript":
        import tree_sitter_javascript as tsjs

        return Language(tsjs.language())

    import tree_sitter_typescript as tsts

    if name == "tsx":
        return Language(tsts.language_tsx())
    return Language(tsts.language_typescript())


def grammar_name(extension: str) -> str | None:
    """Return the grammar used for *extension*, or None if unsupported.

    ``.js``/``.jsx`` use the JSX-aware JavaScript grammar; only
    ``.ts``/``.tsx`` get the TypeScript grammars.
    """
    return {
        ".js": "javascript",
        ".jsx": "javascript",
        ".ts": "typescript",
        ".tsx": "tsx",
    }.get(extension)


def make_parser(extension: str) -> Parser | None:
    """Create a fresh parser for *extension*; parsers are not shared."""
    name = grammar_name(extension)
    if name is None:
        return None
    return Parser(_language(name))
