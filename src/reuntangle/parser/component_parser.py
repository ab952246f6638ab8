"""Extract components and custom hooks from JS/TS source via tree-sitter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from reuntangle.model import (
    ComplexityInputs,
    HookUsage,
    ImportRecord,
    SourceFile,
    Unit,
)
from reuntangle.parser._nodes import first_error_line, node_text, walk
from reuntangle.parser.classify import (
    Candidate,
    classify_name,
    is_hook_call,
    is_likely_component_import,
    is_local_source,
)
from reuntangle.parser.languages import TYPESCRIPT_EXTENSIONS, make_parser
from reuntangle.parser.props import destructured_defaults, extract_props

logger = logging.getLogger(__name__)

# tree-sitter node types for each declaration shape we look at.
_FUNCTION_DECL_TYPES = {"function_declaration", "generator_function_declaration"}
_CLASS_DECL_TYPES = {"class_declaration", "abstract_class_declaration"}
# "function" is the pre-0.21 name of function_expression
_FUNCTION_EXPR_TYPES = {"function_expression", "function", "generator_function"}

# Imports that don't count towards the external library score.
_FRAMEWORK_SOURCES = {"react", "react-dom"}


@dataclass(frozen=True)
class _Declaration:
    name: str
    kind: str
    node: object  # the function/class node
    body: object  # its body node


class ComponentParser:
    """Turn one source file into the units it declares."""

    def parse(self, source_file: SourceFile) -> list[Unit]:
        return parse_file(source_file.path, source_file.extension, source_file.content)


def parse_file(path: str, extension: str, content: str) -> list[Unit]:
    """Parse *content* and return every component/hook it declares.

    Never raises: a file that fails to parse is logged and contributes no
    units, so one bad file cannot abort a whole analysis run.
    """
    parser = make_parser(extension)
    if parser is None:
        logger.warning("Skipping %s: unsupported extension %r", path, extension)
        return []

    try:
        source = content.encode("utf-8")
        tree = parser.parse(source)
        root = tree.root_node
        if root.has_error:
            logger.warning(
                "Failed to parse %s: syntax error near line %s",
                path,
                first_error_line(root),
            )
            return []
        return _extract_units(root, path, extension)
    except Exception as e:
        logger.warning("Failed to parse %s: %s", path, e)
        return []


def _extract_units(root, path: str, extension: str) -> list[Unit]:
    imports = _extract_imports(root)
    import_deps = [
        spec for imp in imports if imp.is_likely_component for spec in imp.specifiers
    ]
    external_libraries = _count_external_libraries(imports)
    is_typescript = extension in TYPESCRIPT_EXTENSIONS

    units: list[Unit] = []
    for decl in _extract_declarations(root):
        hooks = _extract_hooks(decl.body)
        # built-in hooks count too; they stay unresolved in the graph
        hook_calls = [
            h.name for h in hooks if classify_name(h.name) is Candidate.HOOK
        ]

        props = None
        if is_typescript:
            props = extract_props(root, decl.name, destructured_defaults(decl.node))

        dependency_names = tuple(
            name
            for name in dict.fromkeys([*import_deps, *hook_calls])
            if name != decl.name
        )
        lines_of_code = _lines_of_code(decl.body)

        units.append(
            Unit(
                id=f"{path}:{decl.name}",
                name=decl.name,
                file_path=path,
                kind=decl.kind,
                dependency_names=dependency_names,
                imports=tuple(imports),
                hooks=tuple(hooks),
                props=props,
                lines_of_code=lines_of_code,
                complexity_inputs=ComplexityInputs(
                    lines_of_code=lines_of_code,
                    hook_count=sum(h.count for h in hooks),
                    prop_count=len(props.properties) if props else 0,
                    external_library_count=external_libraries,
                ),
            )
        )

    logger.debug("%s: %d units, %d imports", path, len(units), len(imports))
    return units


def _extract_imports(root) -> list[ImportRecord]:
    imports: list[ImportRecord] = []
    for node in walk(root):
        if node.type != "import_statement":
            continue
        source_node = node.child_by_field_name("source")
        if source_node is None:
            continue
        source = node_text(source_node)[1:-1]  # strip quotes

        specifiers: list[str] = []
        for child in node.named_children:
            if child.type == "import_clause":
                specifiers.extend(_clause_specifiers(child))

        imports.append(
            ImportRecord(
                source=source,
                specifiers=tuple(specifiers),
                is_likely_component=is_likely_component_import(source, specifiers),
            )
        )
    return imports


def _clause_specifiers(clause) -> list[str]:
    """Local binding names introduced by an ``import_clause``."""
    names: list[str] = []
    for child in clause.named_children:
        if child.type == "identifier":
            names.append(node_text(child))
        elif child.type == "namespace_import":
            for part in child.named_children:
                if part.type == "identifier":
                    names.append(f"* as {node_text(part)}")
        elif child.type == "named_imports":
            for spec in child.named_children:
                if spec.type != "import_specifier":
                    continue
                local = spec.child_by_field_name("alias") or spec.child_by_field_name(
                    "name"
                )
                if local is not None:
                    names.append(node_text(local))
    return names


def _count_external_libraries(imports: list[ImportRecord]) -> int:
    return len(
        {
            imp.source
            for imp in imports
            if not is_local_source(imp.source) and imp.source not in _FRAMEWORK_SOURCES
        }
    )


def _extract_declarations(root) -> list[_Declaration]:
    """Find qualifying declarations anywhere in the tree, in source order."""
    found: list[_Declaration] = []

    for node in walk(root):
        if node.type in _FUNCTION_DECL_TYPES:
            name = _declared_name(node)
            candidate = classify_name(name) if name else Candidate.NOT_CANDIDATE
            if candidate is not Candidate.NOT_CANDIDATE:
                kind = "hook" if candidate is Candidate.HOOK else "function"
                found.append(_Declaration(name, kind, node, _body(node)))

        elif node.type == "variable_declarator":
            name_node = node.child_by_field_name("name")
            value = node.child_by_field_name("value")
            if name_node is None or name_node.type != "identifier" or value is None:
                continue
            name = node_text(name_node)
            candidate = classify_name(name)
            if candidate is Candidate.NOT_CANDIDATE:
                continue
            if value.type == "arrow_function":
                kind = "arrow"
            elif value.type in _FUNCTION_EXPR_TYPES:
                kind = "function"
            else:
                continue
            if candidate is Candidate.HOOK:
                kind = "hook"
            found.append(_Declaration(name, kind, value, _body(value)))

        elif node.type in _CLASS_DECL_TYPES or _is_default_export(node, "class"):
            name = _declared_name(node)
            candidate = classify_name(name) if name else Candidate.NOT_CANDIDATE
            if candidate is not Candidate.NOT_CANDIDATE:
                kind = "hook" if candidate is Candidate.HOOK else "class"
                found.append(_Declaration(name, kind, node, _body(node)))

        elif node.type in _FUNCTION_EXPR_TYPES and _is_default_export(node):
            # export default function App() {} parsed as a named expression
            name = _declared_name(node)
            candidate = classify_name(name) if name else Candidate.NOT_CANDIDATE
            if candidate is not Candidate.NOT_CANDIDATE:
                kind = "hook" if candidate is Candidate.HOOK else "function"
                found.append(_Declaration(name, kind, node, _body(node)))

    return found


def _is_default_export(node, node_type: str | None = None) -> bool:
    if node_type is not None and node.type != node_type:
        return False
    parent = node.parent
    return node.is_named and parent is not None and parent.type == "export_statement"


def _declared_name(node) -> str | None:
    name_node = node.child_by_field_name("name")
    return node_text(name_node) if name_node is not None else None


def _body(node):
    return node.child_by_field_name("body") or node


def _extract_hooks(body) -> list[HookUsage]:
    """Count hook calls (built-in and custom) inside *body*."""
    counts: dict[str, int] = {}
    for node in walk(body):
        if node.type != "call_expression":
            continue
        callee = node.child_by_field_name("function")
        if callee is None or callee.type != "identifier":
            continue
        name = node_text(callee)
        if is_hook_call(name):
            counts[name] = counts.get(name, 0) + 1
    return [HookUsage(name=name, count=count) for name, count in counts.items()]


def _lines_of_code(body) -> int:
    """Non-blank source lines spanned by *body* (at least 1)."""
    lines = node_text(body).splitlines()
    return max(1, sum(1 for line in lines if line.strip()))
