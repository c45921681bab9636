"""Component detection over a parsed source file.

A top-level declaration is treated as a UI component when its name starts
with an uppercase ASCII letter and either it calls a state primitive or its
text carries something that looks like markup. The markup check is a plain
regex over the declaration text, not an inspection of the return statement;
tag-like text inside strings or comments counts too.
"""

import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from tree_sitter import Node

from hookscan.components.analysis.state_usage_comp import DEFAULT_PATTERNS, StatePattern, find_state_usages
from hookscan.components.analysis.syntax_tree_comp import ParsedSource
from hookscan.helpers.dto.analysis_dto import ComponentRecord

logger = logging.getLogger(__name__)

# Files whose stem ends with one of these roles never define components
NON_COMPONENT_ROLES = ("styled", "styles", "constants", "types", "utils", "helpers", "config", "api", "services")
_NON_COMPONENT_FILE = re.compile(rf"({'|'.join(NON_COMPONENT_ROLES)})$", re.IGNORECASE)

_COMPONENT_NAME = re.compile(r"^[A-Z]")
_MARKUP_SIGNATURE = re.compile(r"<[A-Z]|<[a-z]+[\s>]|<>")

_FUNCTION_DECLARATIONS = {"function_declaration", "generator_function_declaration"}
# "function" is the pre-0.21 grammar name for function_expression
_NAMED_FUNCTION_EXPRESSIONS = {"function_expression", "function", "generator_function"}
_VARIABLE_DECLARATIONS = {"lexical_declaration", "variable_declaration"}
_FUNCTION_INITIALIZERS = {"arrow_function", "function_expression", "function", "generator_function"}


@dataclass(frozen=True)
class ComponentCandidate:
    """A capitalised top-level function, before qualification."""

    name: str
    scan_text: str  # text searched for state usages
    markup_text: str  # text searched for a markup signature


def is_non_component_file(path: str | Path) -> bool:
    """True for styling, constants, types, utils, config, api and service modules."""
    return bool(_NON_COMPONENT_FILE.search(Path(path).stem))


def is_component_name(name: str) -> bool:
    """Component names start with an uppercase ASCII letter."""
    return bool(_COMPONENT_NAME.match(name))


def has_markup_return(code: str) -> bool:
    """True if ``code`` contains an opening tag or an empty fragment."""
    return bool(_MARKUP_SIGNATURE.search(code))


def _top_level_declarations(root: Node) -> Iterator[Node]:
    """Program-level statements, unwrapping ``export`` / ``export default``."""
    for statement in root.named_children:
        if statement.type == "export_statement":
            declaration = statement.child_by_field_name("declaration")
            if declaration is not None:
                yield declaration
                continue
            # export default function Name() {} can surface as a named expression
            value = statement.child_by_field_name("value")
            if value is not None and value.type in _NAMED_FUNCTION_EXPRESSIONS:
                yield value
        else:
            yield statement


def iter_component_candidates(parsed: ParsedSource) -> Iterator[ComponentCandidate]:
    """Yield capitalised candidates: function declarations first, then variables.

    Function declarations are scanned over their body block; arrow and
    function-expression initializers over the whole initializer.
    """
    declarations = list(_top_level_declarations(parsed.root))

    for node in declarations:
        if node.type not in _FUNCTION_DECLARATIONS and node.type not in _NAMED_FUNCTION_EXPRESSIONS:
            continue
        name_node = node.child_by_field_name("name")
        if name_node is None:
            continue
        name = parsed.text_of(name_node)
        if not is_component_name(name):
            continue
        body = node.child_by_field_name("body")
        yield ComponentCandidate(
            name=name,
            scan_text=parsed.text_of(body) if body is not None else "",
            markup_text=parsed.text_of(node),
        )

    for node in declarations:
        if node.type not in _VARIABLE_DECLARATIONS:
            continue
        for declarator in node.named_children:
            if declarator.type != "variable_declarator":
                continue
            name_node = declarator.child_by_field_name("name")
            if name_node is None or name_node.type != "identifier":
                continue
            name = parsed.text_of(name_node)
            if not is_component_name(name):
                continue
            value = declarator.child_by_field_name("value")
            if value is None or value.type not in _FUNCTION_INITIALIZERS:
                continue
            text = parsed.text_of(value)
            yield ComponentCandidate(name=name, scan_text=text, markup_text=text)


def classify_components(
    parsed: ParsedSource,
    patterns: Sequence[StatePattern] = DEFAULT_PATTERNS,
) -> list[ComponentRecord]:
    """Detect the components a file defines and attach their state usages.

    Args:
        parsed: Parsed source file
        patterns: State pattern table passed through to extraction

    Returns:
        ComponentRecords in declaration order (functions before variables).
        Empty for non-component files.

    """
    if is_non_component_file(parsed.path):
        logger.debug("[classifier] Skipping non-component file %s", parsed.relative_path)
        return []

    components: list[ComponentRecord] = []

    for candidate in iter_component_candidates(parsed):
        usages = find_state_usages(candidate.scan_text, parsed.relative_path, candidate.name, patterns)
        if usages or has_markup_return(candidate.markup_text):
            components.append(ComponentRecord(name=candidate.name, file=parsed.relative_path, usages=usages))

    return components
