# --- Data models for the scanner --------------------------------------------
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class TypeKind(Enum):
    """The two kinds of top-level declaration the scanner classifies."""
    CLASS = "class"
    INTERFACE = "interface"


@dataclass(frozen=True)
class NameRef:
    """A type reference exactly as written in source (never import-resolved)."""
    text: str  # e.g. "Service" or "org.springframework.stereotype.Service"

    @property
    def simple_name(self) -> str:
        """Trailing identifier of a dotted reference, or the bare identifier."""
        return simple_name(self.text)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TypeDeclaration:
    """Normalized view of the first top-level class or interface of a file."""
    kind: TypeKind
    simple_name: str  # e.g. "UserService"
    source_file: Path
    is_abstract: bool = False
    annotation_refs: tuple[NameRef, ...] = ()  # source order
    # `implements` list of a class, `extends` list of an interface
    implemented_or_extended_refs: tuple[NameRef, ...] = ()


@dataclass(frozen=True)
class MatchCriteria:
    """What makes a declaration an entry type. Fixed for a whole run."""
    annotations: tuple[str, ...] = ()
    interfaces: tuple[str, ...] = ()
    exclude_abstract: bool = True

    @property
    def is_empty(self) -> bool:
        return not self.annotations and not self.interfaces


@dataclass
class ScanResult:
    """Matched files of one scan, absolute paths sorted ascending."""
    count: int = 0
    files: list[str] = field(default_factory=list)

    @classmethod
    def from_paths(cls, paths) -> "ScanResult":
        files = sorted({str(p) for p in paths})
        return cls(count=len(files), files=files)

    def to_dict(self) -> dict:
        return {"count": self.count, "files": list(self.files)}


def simple_name(name: str) -> str:
    """`a.b.Foo` -> `Foo`, `Foo` -> `Foo`."""
    return name.rsplit(".", 1)[-1]
