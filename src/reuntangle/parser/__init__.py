"""Source parser: JS/TS files into component and hook units."""

from reuntangle.parser.classify import Candidate, classify_name
from reuntangle.parser.component_parser import ComponentParser, parse_file

__all__ = [
    "Candidate",
    "ComponentParser",
    "classify_name",
    "parse_file",
]
