import logging
from typing import Optional

from tree_sitter import Node

from java_scanner.models.ast_models import NameRef, TypeDeclaration, TypeKind
from java_scanner.parser import CompilationUnit
from java_scanner.tree_sitter_helpers import child_of_type, children_of_type, node_text

logger = logging.getLogger(__name__)

_DECLARATION_KINDS = {
    "class_declaration": TypeKind.CLASS,
    "record_declaration": TypeKind.CLASS,  # records are classes with an implements list
    "interface_declaration": TypeKind.INTERFACE,
}

# interfaces of a class vs. parents of an interface; both are just edges
_REFERENCE_CLAUSES = {
    TypeKind.CLASS: "super_interfaces",
    TypeKind.INTERFACE: "extends_interfaces",
}

_ANNOTATION_NODES = ("marker_annotation", "annotation")
_TYPE_NAME_NODES = ("type_identifier", "scoped_type_identifier")


def extract_type_declaration(unit: CompilationUnit) -> Optional[TypeDeclaration]:
    """
    Returns the first top-level class or interface of the unit, or None when
    there isn't one (enum-only files, package-info.java, empty files). A record
    counts as a class.
    """
    node = find_top_level_declaration(unit.root)
    if node is None:
        return None

    src = unit.source_bytes
    kind = _DECLARATION_KINDS[node.type]
    name_node = node.child_by_field_name("name")
    if name_node is None:
        return None

    modifiers = child_of_type(node, "modifiers")
    return TypeDeclaration(
        kind=kind,
        simple_name=node_text(src, name_node),
        source_file=unit.path,
        is_abstract=_has_abstract_modifier(modifiers),
        annotation_refs=tuple(_annotation_refs(src, modifiers)),
        implemented_or_extended_refs=tuple(_reference_list(src, node, kind)),
    )


def find_top_level_declaration(root: Node) -> Optional[Node]:
    """
    First found wins: later top-level types in the same file are ignored, and
    nested types are never looked at.
    """
    for child in root.children:
        if child.type in _DECLARATION_KINDS:
            return child
    return None


# -- AST helpers ----------------------------------------------------------

def _has_abstract_modifier(modifiers: Optional[Node]) -> bool:
    if modifiers is None:
        return False
    return any(child.type == "abstract" for child in modifiers.children)


def _annotation_refs(src: bytes, modifiers: Optional[Node]) -> list[NameRef]:
    """`@Service` -> Service, `@org.x.Service("a")` -> org.x.Service"""
    if modifiers is None:
        return []
    refs = []
    for ann in children_of_type(modifiers, *_ANNOTATION_NODES):
        name_node = ann.child_by_field_name("name")
        if name_node is not None:
            refs.append(NameRef(_compact(node_text(src, name_node))))
    return refs


def _reference_list(src: bytes, node: Node, kind: TypeKind) -> list[NameRef]:
    clause = child_of_type(node, _REFERENCE_CLAUSES[kind])
    if clause is None:
        return []
    type_list = child_of_type(clause, "type_list")
    if type_list is None:
        return []

    refs = []
    for type_node in type_list.named_children:
        name_node = _strip_type_arguments(type_node)
        if name_node is None:
            logger.debug("Skipping unsupported type reference %s", type_node.type)
            continue
        refs.append(NameRef(_compact(node_text(src, name_node))))
    return refs


def _strip_type_arguments(type_node: Node) -> Optional[Node]:
    """`Handler<Event>` -> the `Handler` node."""
    if type_node.type in _TYPE_NAME_NODES:
        return type_node
    if type_node.type == "generic_type":
        return child_of_type(type_node, *_TYPE_NAME_NODES)
    return None


def _compact(text: str) -> str:
    # `java.io .Serializable` is legal Java
    return "".join(text.split())
