from pathlib import Path
from typing import Callable

import pytest

from java_scanner.parser import JavaSourceParser


@pytest.fixture(scope="session")
def java_parser() -> JavaSourceParser:
    return JavaSourceParser()


@pytest.fixture
def java_tree(tmp_path: Path) -> Callable[[dict[str, str]], list[Path]]:
    """Write {relative path: source} under tmp_path and return the paths, sorted."""

    def _write(sources: dict[str, str]) -> list[Path]:
        paths = []
        for rel, source in sources.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
            paths.append(path)
        return sorted(paths, key=str)

    return _write
