"""
Option validation for bdscan.

Turns the raw flag values collected by the CLI layer into a validated,
immutable ScanOptions instance.
"""
import logging
import os
from typing import Any, Dict, Optional

from bdscan.models import LATEST_VERSION, ProjectType, ScanOptions, VersionPhase
from bdscan.rich_utils.ui_helpers import Reporter
from bdscan.utils.exceptions import (
    InvalidSourcePath,
    MissingRequiredOption,
    UnsupportedProjectType,
)

logger = logging.getLogger(__name__)


def resolve_version_phase(version: str, explicit_phase: Optional[str]) -> str:
    """Explicit phase wins; otherwise DEVELOPMENT for 'latest' and PRERELEASE for anything else."""
    if explicit_phase:
        return explicit_phase
    if version == LATEST_VERSION:
        return VersionPhase.DEVELOPMENT.value
    return VersionPhase.PRERELEASE.value


class OptionValidator:
    """Validates raw option values and builds ScanOptions."""

    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter = reporter or Reporter()

    @staticmethod
    def require(name: str, value: Optional[str]) -> str:
        if not value:
            raise MissingRequiredOption(name)
        return value

    @staticmethod
    def check_project_type(value: str) -> ProjectType:
        try:
            return ProjectType(value)
        except ValueError:
            raise UnsupportedProjectType(value, ProjectType.values())

    @staticmethod
    def check_source_path(source_path: str) -> str:
        if not os.path.exists(source_path):
            raise InvalidSourcePath(source_path)
        return source_path

    def validate(self, raw: Dict[str, Any]) -> ScanOptions:
        """
        Validate raw values keyed by ScanOptions field name.

        Fields missing from ``raw`` take the ScanOptions defaults.

        Raises:
            MissingRequiredOption: projectType or projectName not given
            UnsupportedProjectType: projectType is not npm, maven, ios or android
            InvalidSourcePath: sourcePath does not exist
        """
        self.reporter.info("Validating program options")

        values = dict(raw)
        project_type = self.require("projectType", values.get("project_type"))
        self.require("projectName", values.get("project_name"))

        values["project_type"] = self.check_project_type(project_type)

        source_path = values.get("source_path", ScanOptions.source_path)
        values["source_path"] = self.check_source_path(source_path)

        version = values.get("version", LATEST_VERSION)
        values["detect_project_version_phase"] = resolve_version_phase(
            version, values.get("detect_project_version_phase")
        )

        options = ScanOptions(**values)
        logger.debug(
            "Validated options for %s project '%s' (version=%s, phase=%s)",
            options.project_type.value,
            options.project_name,
            options.version,
            options.detect_project_version_phase,
        )
        return options
