"""Configuration document for the scanner."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from java_scanner.errors import ConfigLoadError
from java_scanner.models.ast_models import MatchCriteria

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("scan-config.json")
DEFAULT_SCAN_DIR = Path("./src/main/java")


class ScanConfig(BaseModel):
    """Where to look and what counts as an entry type.

    Field aliases follow the camelCase keys of the JSON document.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    scan_dir: Path = Field(default=DEFAULT_SCAN_DIR, alias="scanDir")
    annotations: list[str] = Field(default_factory=list)
    interfaces: list[str] = Field(default_factory=list)
    exclude_abstract: bool = Field(default=True, alias="excludeAbstract")

    @field_validator("scan_dir", "annotations", "interfaces", "exclude_abstract", mode="before")
    @classmethod
    def _null_means_unset(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    def with_scan_dir(self, scan_dir) -> ScanConfig:
        return self.model_copy(update={"scan_dir": Path(scan_dir)})

    def to_criteria(self) -> MatchCriteria:
        return MatchCriteria(
            annotations=tuple(self.annotations),
            interfaces=tuple(self.interfaces),
            exclude_abstract=self.exclude_abstract,
        )


def load_config(path=DEFAULT_CONFIG_PATH) -> ScanConfig:
    """Read and validate a JSON configuration document.

    Args:
        path: Location of the document.

    Returns:
        The validated configuration.

    Raises:
        ConfigLoadError: The file is missing or unreadable, is not JSON, or
            does not describe a valid configuration.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigLoadError(f"Error loading config from {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigLoadError(f"Error loading config from {path}: invalid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigLoadError(f"Error loading config from {path}: expected a JSON object")

    try:
        config = ScanConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigLoadError(f"Error loading config from {path}: {exc}") from exc

    logger.debug("Loaded config from %s: %s", path, config)
    return config
