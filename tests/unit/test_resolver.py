from pathlib import Path

from java_scanner.indexer import SymbolIndex
from java_scanner.models.ast_models import NameRef, TypeDeclaration, TypeKind
from java_scanner.resolver import InterfaceGraphResolver, refers_to


def _iface(name: str, *parents: str, path: str | None = None) -> TypeDeclaration:
    return TypeDeclaration(
        kind=TypeKind.INTERFACE,
        simple_name=name,
        source_file=Path(path or f"/src/{name}.java"),
        implemented_or_extended_refs=tuple(NameRef(p) for p in parents),
    )


def _class(name: str, *interfaces: str, path: str | None = None) -> TypeDeclaration:
    return TypeDeclaration(
        kind=TypeKind.CLASS,
        simple_name=name,
        source_file=Path(path or f"/src/{name}.java"),
        implemented_or_extended_refs=tuple(NameRef(i) for i in interfaces),
    )


def _resolver(*decls: TypeDeclaration) -> InterfaceGraphResolver:
    return InterfaceGraphResolver(SymbolIndex.build(decls))


def test_refers_to_compares_text_or_trailing_name() -> None:
    assert refers_to(NameRef("Base"), "Base")
    assert refers_to(NameRef("com.acme.Base"), "Base")
    assert refers_to(NameRef("Base"), "com.acme.Base")
    assert refers_to(NameRef("com.acme.Base"), "com.acme.Base")
    assert not refers_to(NameRef("BaseX"), "Base")


def test_direct_implementation() -> None:
    impl = _class("Impl", "Runnable")

    assert _resolver(impl).implements_target(impl, "Runnable")


def test_transitive_chain_through_other_files() -> None:
    base = _iface("Base")
    mid = _iface("Mid", "Base")
    impl = _class("Impl", "Mid")

    assert _resolver(base, mid, impl).implements_target(impl, "Base")


def test_qualified_reference_is_followed_by_simple_name() -> None:
    mid = _iface("Mid", "com.acme.Base")
    impl = _class("Impl", "com.acme.Mid")

    assert _resolver(mid, impl).implements_target(impl, "Base")


def test_unresolved_reference_is_a_dead_end() -> None:
    impl = _class("Impl", "ThirdPartyListener")

    assert not _resolver(impl).implements_target(impl, "Base")


def test_direct_cycle_terminates() -> None:
    x = _iface("X", "Y")
    y = _iface("Y", "X")
    resolver = _resolver(x, y)

    assert not resolver.implements_target(x, "Z")
    assert not resolver.implements_target(y, "Z")
    # names in the one-hop lists still match
    assert resolver.implements_target(x, "Y")
    assert resolver.implements_target(x, "X")


def test_self_reference_terminates() -> None:
    loop = _iface("Loop", "Loop")

    assert not _resolver(loop).implements_target(loop, "Other")


def test_longer_cycle_with_exit_still_finds_target() -> None:
    a = _iface("A", "B")
    b = _iface("B", "C")
    c = _iface("C", "A", "Target")
    impl = _class("Impl", "A")

    assert _resolver(a, b, c, impl).implements_target(impl, "Target")


def test_diamond_explores_every_branch() -> None:
    left = _iface("Left", "Shared")
    right = _iface("Right", "Shared", "Wanted")
    shared = _iface("Shared")
    impl = _class("Impl", "Left", "Right")

    assert _resolver(left, right, shared, impl).implements_target(impl, "Wanted")


def test_ambiguous_parent_resolves_to_first_path() -> None:
    winner = _iface("Api", "Target", path="/src/a/Api.java")
    loser = _iface("Api", path="/src/b/Api.java")
    impl = _class("Impl", "Api")
    resolver = _resolver(loser, winner, impl)

    assert resolver.implements_target(impl, "Target")

    winner = _iface("Api", path="/src/a/Api.java")
    loser = _iface("Api", "Target", path="/src/b/Api.java")
    assert not _resolver(loser, winner, impl).implements_target(impl, "Target")


def test_implements_any_is_logical_or() -> None:
    impl = _class("Impl", "Runnable")
    resolver = _resolver(impl)

    assert resolver.implements_any(impl, ["Callable", "Runnable"])
    assert not resolver.implements_any(impl, ["Callable"])
    assert not resolver.implements_any(impl, [])
