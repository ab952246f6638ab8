"""Extract ``{Name}Props`` shapes from TypeScript interfaces and type aliases."""

from __future__ import annotations

from reuntangle.model import PropProperty, PropsInfo
from reuntangle.parser._nodes import node_text, walk

_SIMPLE_TYPES = {
    "string",
    "number",
    "boolean",
    "any",
    "unknown",
    "void",
    "null",
    "undefined",
}

# Default values we record verbatim; anything else is an expression.
_LITERAL_TYPES = {"string", "number", "true", "false", "null", "undefined"}

# interface bodies are ``interface_body`` in current grammars, ``object_type`` in older ones
_MEMBER_CONTAINERS = {"interface_body", "object_type"}


def extract_props(root, unit_name: str, defaults: dict[str, str]) -> PropsInfo | None:
    """Return the props shape declared as ``{unit_name}Props`` in *root*.

    The last matching declaration in the file wins.
    """
    type_name = f"{unit_name}Props"
    props: PropsInfo | None = None

    for node in walk(root):
        if node.type == "interface_declaration":
            body = node.child_by_field_name("body")
        elif node.type == "type_alias_declaration":
            body = node.child_by_field_name("value")
        else:
            continue

        name_node = node.child_by_field_name("name")
        if name_node is None or node_text(name_node) != type_name:
            continue
        if body is None or body.type not in _MEMBER_CONTAINERS:
            continue

        props = PropsInfo(
            type_name=type_name,
            properties=tuple(_properties(body, defaults)),
        )

    return props


def _properties(body, defaults: dict[str, str]) -> list[PropProperty]:
    properties: list[PropProperty] = []
    for member in body.named_children:
        if member.type != "property_signature":
            continue
        key = member.child_by_field_name("name")
        # string-literal and computed keys are skipped
        if key is None or key.type != "property_identifier":
            continue
        name = node_text(key)
        optional = any(child.type == "?" for child in member.children)
        properties.append(
            PropProperty(
                name=name,
                type=_type_name(member.child_by_field_name("type")),
                required=not optional,
                default=defaults.get(name),
            )
        )
    return properties


def _type_name(annotation) -> str:
    """Render a type annotation the way the props panel shows it."""
    if annotation is None or not annotation.named_children:
        return "unknown"

    type_node = annotation.named_children[0]
    text = node_text(type_node)

    if type_node.type in ("predefined_type", "literal_type") and text in _SIMPLE_TYPES:
        return text
    if type_node.type == "type_identifier":
        return text
    if type_node.type == "generic_type":
        name = type_node.child_by_field_name("name")
        if name is not None and name.type == "type_identifier":
            return node_text(name)
    return "complex"


def destructured_defaults(function_node) -> dict[str, str]:
    """Map prop names to literal defaults in ``({ size = "md" }) => ...``."""
    params = function_node.child_by_field_name("parameters")
    if params is None or not params.named_children:
        return {}

    first = params.named_children[0]
    # TS wraps the pattern: required_parameter / optional_parameter
    if first.type in ("required_parameter", "optional_parameter"):
        first = first.child_by_field_name("pattern")
    # JS: ({ a = 1 } = {}) => ...
    if first is not None and first.type == "assignment_pattern":
        first = first.child_by_field_name("left")
    if first is None or first.type != "object_pattern":
        return {}

    defaults: dict[str, str] = {}
    for entry in first.named_children:
        if entry.type == "object_assignment_pattern":
            left = entry.child_by_field_name("left")
            right = entry.child_by_field_name("right")
        elif entry.type == "pair_pattern":
            value = entry.child_by_field_name("value")
            if value is None or value.type != "assignment_pattern":
                continue
            left = entry.child_by_field_name("key")
            right = value.child_by_field_name("right")
        else:
            continue
        if left is None or right is None or right.type not in _LITERAL_TYPES:
            continue
        defaults[node_text(left)] = node_text(right)
    return defaults
