import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from java_scanner.errors import ParseError, UnreadableFileError
from java_scanner.extractor import extract_type_declaration
from java_scanner.indexer import SymbolIndex
from java_scanner.inputs.config import ScanConfig
from java_scanner.inputs.directory_scanning import find_java_files
from java_scanner.matching import Classifier
from java_scanner.models.ast_models import MatchCriteria, ScanResult, TypeDeclaration
from java_scanner.parser import AstCache, JavaSourceParser
from java_scanner.resolver import InterfaceGraphResolver

logger = logging.getLogger(__name__)


@dataclass
class ScanContext:
    """
    Everything one scan owns: the parse cache, the extracted declarations and
    the symbol index over them. Built once, then only read.
    """
    files: list[Path]
    cache: AstCache
    declarations: list[TypeDeclaration] = field(default_factory=list)
    index: SymbolIndex = field(default_factory=SymbolIndex)
    errors: list[tuple[Path, str]] = field(default_factory=list)

    @classmethod
    def build(cls, files: Iterable, parser: Optional[JavaSourceParser] = None) -> "ScanContext":
        """
        Parses and extracts every file up front. Interface resolution may need
        any file in the set, so the index has to be complete before the first
        declaration gets classified.
        """
        ctx = cls(files=[Path(f) for f in files], cache=AstCache(parser or JavaSourceParser()))
        for path in ctx.files:
            try:
                unit = ctx.cache.get(path)
            except UnreadableFileError as e:
                logger.debug("Skipping unreadable %s: %s", path, e.message)
                ctx.errors.append((path, e.message))
                continue
            except ParseError as e:
                logger.warning("Error parsing %s: %s", path, e.message)
                ctx.errors.append((path, e.message))
                continue

            decl = extract_type_declaration(unit)
            if decl is None:
                logger.debug("No class or interface in %s", path)
                continue
            ctx.declarations.append(decl)

        ctx.index = SymbolIndex.build(ctx.declarations)
        return ctx


def classify(ctx: ScanContext, criteria: MatchCriteria) -> ScanResult:
    """Runs the classifier over every declaration and aggregates the matches."""
    if criteria.is_empty:
        return ScanResult()

    classifier = Classifier(criteria, InterfaceGraphResolver(ctx.index))
    matched = [decl.source_file for decl in ctx.declarations if classifier.matches(decl)]
    return ScanResult.from_paths(Path(p).absolute() for p in matched)


def scan_files(files: Iterable, criteria: MatchCriteria,
               parser: Optional[JavaSourceParser] = None) -> ScanResult:
    return classify(ScanContext.build(files, parser), criteria)


class JavaFileScanner:
    """
    Programmatic entry point: find the .java files under the configured
    directory and report the ones that are entry types.
    """

    def __init__(self, config: Optional[ScanConfig] = None, **overrides):
        config = config or ScanConfig()
        if overrides:
            config = ScanConfig.model_validate({**config.model_dump(), **overrides})
        self.config = config
        self.criteria = config.to_criteria()

    def find_java_files(self) -> list[Path]:
        return find_java_files(self.config.scan_dir)

    def scan(self) -> ScanResult:
        files = self.find_java_files()
        ctx = ScanContext.build(files)
        result = classify(ctx, self.criteria)
        logger.info(
            "Scanned %d files (%d types, %d unparseable): %d matched",
            len(files), len(ctx.declarations), len(ctx.errors), result.count,
        )
        return result
