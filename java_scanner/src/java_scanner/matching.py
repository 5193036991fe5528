import logging

from java_scanner.models.ast_models import MatchCriteria, TypeDeclaration, simple_name
from java_scanner.resolver import InterfaceGraphResolver

logger = logging.getLogger(__name__)


class AnnotationMatcher:
    """
    Matches annotations by trailing identifier or exact dotted text.

    Imports are not consulted, so a bare `@Service` matches a configured
    `com.example.Service` even when the file actually imports some other
    `Service`. Known false-positive source.
    """

    def __init__(self, annotations):
        self.qualified = frozenset(annotations)
        self.simple = frozenset(simple_name(a) for a in annotations)

    def matches(self, decl: TypeDeclaration) -> bool:
        if not self.qualified:
            return False
        return any(
            ref.simple_name in self.simple or ref.text in self.qualified
            for ref in decl.annotation_refs
        )


class Classifier:
    """Decides whether one declaration is an entry type under the criteria."""

    def __init__(self, criteria: MatchCriteria, resolver: InterfaceGraphResolver):
        self.criteria = criteria
        self.resolver = resolver
        self.annotations = AnnotationMatcher(criteria.annotations)

    def is_eligible(self, decl: TypeDeclaration) -> bool:
        return not (self.criteria.exclude_abstract and decl.is_abstract)

    def has_configured_annotation(self, decl: TypeDeclaration) -> bool:
        return self.annotations.matches(decl)

    def has_configured_interface(self, decl: TypeDeclaration) -> bool:
        return self.resolver.implements_any(decl, self.criteria.interfaces)

    def matches(self, decl: TypeDeclaration) -> bool:
        if not self.is_eligible(decl):
            logger.debug("Skipping abstract %s", decl.simple_name)
            return False
        matched = self.has_configured_annotation(decl) or self.has_configured_interface(decl)
        logger.debug("%s %s", decl.simple_name, "matched" if matched else "not matched")
        return matched
