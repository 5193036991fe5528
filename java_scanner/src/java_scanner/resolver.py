import logging

from java_scanner.indexer import SymbolIndex
from java_scanner.models.ast_models import NameRef, TypeDeclaration, simple_name

logger = logging.getLogger(__name__)


def refers_to(ref: NameRef, target: str) -> bool:
    """Same text, or same trailing identifier (`a.b.Foo` refers to `Foo`)."""
    return ref.text == target or ref.simple_name == simple_name(target)


class InterfaceGraphResolver:
    """
    Answers "does this type implement X, directly or through its parents?"
    by walking implements/extends edges across files via the symbol index.
    """

    def __init__(self, index: SymbolIndex):
        self.index = index

    def implements_target(self, decl: TypeDeclaration, target: str) -> bool:
        """
        Depth-first over an explicit stack. `visited` holds simple names and
        only grows; the names come from a finite index, so the walk ends even
        when the reference graph has cycles (`A extends B`, `B extends A`).
        """
        visited: set[str] = set()
        stack = [decl]
        while stack:
            current = stack.pop()
            if current.simple_name in visited:
                continue
            visited.add(current.simple_name)

            refs = current.implemented_or_extended_refs
            if any(refers_to(ref, target) for ref in refs):
                logger.debug(
                    "%s reaches %s through %s", decl.simple_name, target, current.simple_name
                )
                return True

            # reversed so the leftmost parent is explored first
            for ref in reversed(refs):
                parent = self.index.lookup(ref.text)
                if parent is not None and parent.simple_name not in visited:
                    stack.append(parent)
        return False

    def implements_any(self, decl: TypeDeclaration, targets) -> bool:
        return any(self.implements_target(decl, target) for target in targets)
