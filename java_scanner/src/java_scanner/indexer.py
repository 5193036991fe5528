import logging
from typing import Iterable, Optional

from java_scanner.models.ast_models import TypeDeclaration, simple_name

logger = logging.getLogger(__name__)


# --- The Symbol Index ----------------------------------------------------------

class SymbolIndex:
    """
    Maps a simple type name to every declaration carrying it.

    There is no import information to go on, so `com.a.Foo` and `com.b.Foo`
    land under the same key. Lookups pick the candidate from the
    lexicographically-first file path: deterministic, though not always the
    type the source author meant.
    """

    def __init__(self):
        self._by_name: dict[str, list[TypeDeclaration]] = {}

    @classmethod
    def build(cls, declarations: Iterable[TypeDeclaration]) -> "SymbolIndex":
        index = cls()
        for decl in declarations:
            index._by_name.setdefault(decl.simple_name, []).append(decl)

        for name, candidates in index._by_name.items():
            candidates.sort(key=lambda d: str(d.source_file))
            if len(candidates) > 1:
                logger.debug(
                    "Ambiguous type name %s (%d candidates), using %s",
                    name, len(candidates), candidates[0].source_file,
                )
        return index

    def lookup(self, name: str) -> Optional[TypeDeclaration]:
        """
        Resolves a bare or dotted name by its trailing identifier. None means
        the type lives outside the scanned tree (JDK, third-party jar, ...).
        """
        candidates = self._by_name.get(simple_name(name))
        return candidates[0] if candidates else None

    def candidates(self, name: str) -> list[TypeDeclaration]:
        return list(self._by_name.get(simple_name(name), ()))

    def __contains__(self, name: str) -> bool:
        return simple_name(name) in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)
