"""Naming heuristics that decide what counts as a component or hook."""

from __future__ import annotations

import enum
import re

_COMPONENT_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
_HOOK_RE = re.compile(r"^use[A-Z][a-zA-Z0-9]*$")
_HOOK_PREFIX_RE = re.compile(r"^use[A-Z]")

# Hooks shipped with React itself.
BUILTIN_HOOKS = frozenset(
    {
        "useState",
        "useEffect",
        "useContext",
        "useReducer",
        "useCallback",
        "useMemo",
        "useRef",
        "useImperativeHandle",
        "useLayoutEffect",
        "useDebugValue",
        "useTransition",
        "useDeferredValue",
        "useId",
    }
)


class Candidate(enum.Enum):
    COMPONENT = "component"
    HOOK = "hook"
    NOT_CANDIDATE = "not-candidate"


def classify_name(name: str) -> Candidate:
    """Classify a declared identifier.

    ``useThing`` is a hook, ``Thing`` is a component, anything else
    (``helper``, ``user``, ``use_thing``) is ignored.
    """
    if _HOOK_RE.match(name):
        return Candidate.HOOK
    if _COMPONENT_RE.match(name):
        return Candidate.COMPONENT
    return Candidate.NOT_CANDIDATE


def is_hook_call(name: str) -> bool:
    """Return True for callees that should be counted as hook usages."""
    return name in BUILTIN_HOOKS or bool(_HOOK_PREFIX_RE.match(name))


def is_local_source(source: str) -> bool:
    return source.startswith(".") or source.startswith("/")


def is_likely_component_import(source: str, specifiers: list[str]) -> bool:
    """Guess whether an import brings in components.

    Local imports always might; package imports only when a binding is
    PascalCase (``import { Button } from "@mui/material"``).
    """
    if is_local_source(source):
        return True
    return any(spec.removeprefix("* as ")[:1].isupper() for spec in specifiers)
