"""
Declaration Manifest
====================

Loads dependency declarations from YAML so they can be applied before a
command script runs.

Format:
    version: "1"
    dependencies:
      TELNET: [TCPIP, NETCARD]
      TCPIP: [NETCARD]

Each entry is applied with the same accumulate-only semantics as DEPEND.
"""

from pathlib import Path
from typing import Dict, List, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from depgraph_common.constants import MANIFEST_VERSIONS
from depgraph_common.errors import ManifestError
from depgraph_common.logger import get_logger

from .tracker import InstallationTracker

logger = get_logger(__name__)


class DeclarationManifest(BaseModel):
    """Validated manifest document."""

    version: str = "1"
    dependencies: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("version", mode="before")
    @classmethod
    def _check_version(cls, value) -> str:
        value = str(value)
        if value not in MANIFEST_VERSIONS:
            raise ValueError(f"Unsupported manifest version '{value}'. Supported: {MANIFEST_VERSIONS}")
        return value

    @field_validator("dependencies")
    @classmethod
    def _check_names(cls, value: Dict[str, List[str]]) -> Dict[str, List[str]]:
        for component, deps in value.items():
            for name in [component, *deps]:
                if not name or any(ch.isspace() for ch in name):
                    raise ValueError(f"Invalid component name: '{name}'")
        return value

    def apply(self, tracker: InstallationTracker) -> int:
        """Declare every entry on ``tracker``. Returns the number of components declared."""
        for component, deps in self.dependencies.items():
            tracker.declare(component, deps)
        logger.info("Applied manifest", components=len(self.dependencies))
        return len(self.dependencies)


def load_manifest_string(content: str) -> DeclarationManifest:
    """
    Parse a manifest from YAML text.

    Raises:
        ManifestError: Invalid YAML or invalid document structure
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in manifest: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ManifestError("Manifest must be a mapping with a 'dependencies' key")

    try:
        return DeclarationManifest.model_validate(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ManifestError(f"Invalid manifest: {details}") from e


def load_manifest(path: Union[str, Path]) -> DeclarationManifest:
    """
    Load a manifest file.

    Raises:
        ManifestError: File missing, unreadable or invalid
    """
    path = Path(path)
    if not path.is_file():
        raise ManifestError(f"Manifest file not found: {path}")
    return load_manifest_string(path.read_text(encoding="utf-8"))
