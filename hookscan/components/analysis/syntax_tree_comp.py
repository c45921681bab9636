"""Tree-sitter parsing of TypeScript / TSX component sources.

Grammars come from the ``tree-sitter-typescript`` wheel. One parser per
grammar is built lazily and reused for the rest of the process.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from hookscan.helpers.exceptions import SourceParseError

logger = logging.getLogger(__name__)

_GRAMMAR_LOADERS = {
    "tsx": tree_sitter_typescript.language_tsx,
    "typescript": tree_sitter_typescript.language_typescript,
}

_parsers: dict[str, Parser] = {}


@dataclass
class ParsedSource:
    """A source file together with its syntax tree."""

    path: Path
    relative_path: str  # POSIX, relative to the analysis root
    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text_of(self, node: Node) -> str:
        """Exact source text covered by ``node``."""
        return self.source[node.start_byte : node.end_byte].decode("utf-8")


def grammar_for_suffix(suffix: str) -> str:
    """Grammar name for a file extension; .tsx needs the JSX-aware grammar."""
    return "tsx" if suffix.lower() in {".tsx", ".jsx"} else "typescript"


def get_parser(grammar: str) -> Parser:
    """Return the shared parser for ``grammar`` ("tsx" or "typescript")."""
    if grammar not in _parsers:
        _parsers[grammar] = Parser(Language(_GRAMMAR_LOADERS[grammar]()))
    return _parsers[grammar]


def parse_source(source: bytes, grammar: str = "tsx") -> Tree:
    """Parse raw source bytes with the given grammar."""
    return get_parser(grammar).parse(source)


def parse_source_file(path: Path, relative_path: str) -> ParsedSource:
    """Read and parse one component source file.

    Tree-sitter recovers from syntax errors, so a tree with error nodes is
    still returned; only unreadable or non-UTF-8 files fail.

    Raises:
        SourceParseError: If the file cannot be read or decoded

    """
    try:
        source = path.read_bytes()
        source.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceParseError(relative_path, str(e)) from e

    tree = parse_source(source, grammar_for_suffix(path.suffix))
    if tree.root_node.has_error:
        logger.debug("[parser] Syntax errors recovered in %s", relative_path)

    return ParsedSource(path=path, relative_path=relative_path, source=source, tree=tree)
