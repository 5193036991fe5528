import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import tree_sitter_java
from tree_sitter import Language, Parser, Tree

from java_scanner.errors import ParseError, UnreadableFileError
from java_scanner.tree_sitter_helpers import first_error_node, node_point

logger = logging.getLogger(__name__)


# --- Tree-sitter language loading -------------------------------------------

def load_java_language() -> Language:
    """
    Loads the Tree-sitter Java language for the Python bindings.
    tree-sitter >= 0.22 grammar packages expose a language() function that
    returns the Language capsule, so there is no build step.
    """
    return Language(tree_sitter_java.language())


@dataclass
class CompilationUnit:
    """One parsed source file."""
    path: Path
    source_bytes: bytes
    tree: Tree

    @property
    def root(self):
        return self.tree.root_node


# --- The parser ---------------------------------------------------------------

class JavaSourceParser:
    """
    Thin wrapper around a Tree-sitter parser for Java. Tree-sitter never raises
    on bad input, it just inserts ERROR/MISSING nodes, so those are turned into
    a ParseError here.
    """

    def __init__(self, language: Optional[Language] = None):
        self.language = language or load_java_language()
        self.parser = Parser(self.language)

    def parse(self, source: str, path="<memory>") -> CompilationUnit:
        """
        Parses a single source string into a CompilationUnit.
        """
        source_bytes = source.encode("utf-8")
        tree = self.parser.parse(source_bytes)
        if tree.root_node.has_error:
            bad = first_error_node(tree.root_node)
            line, col = node_point(bad) if bad is not None else (0, 0)
            raise ParseError(path, f"syntax error at {line + 1}:{col + 1}")
        return CompilationUnit(path=Path(path), source_bytes=source_bytes, tree=tree)


class AstCache:
    """
    Parses each file at most once per run. Failures are remembered too, a
    second parse of the same bytes would fail the same way.
    """

    def __init__(self, parser: JavaSourceParser):
        self.parser = parser
        self._units: dict[Path, CompilationUnit] = {}
        self._failures: dict[Path, ParseError] = {}

    def get(self, path: Path) -> CompilationUnit:
        path = Path(path)
        if path in self._units:
            return self._units[path]
        if path in self._failures:
            raise self._failures[path]

        try:
            # undecodable bytes (latin-1 comments, ...) become U+FFFD
            source = path.read_text(encoding="utf-8", errors="replace")
            unit = self.parser.parse(source, path)
        except OSError as exc:
            error = UnreadableFileError(path, f"cannot read file: {exc}")
            self._failures[path] = error
            raise error from exc
        except ParseError as exc:
            self._failures[path] = exc
            raise

        self._units[path] = unit
        return unit

    def __contains__(self, path) -> bool:
        return Path(path) in self._units

    def __len__(self) -> int:
        return len(self._units)
