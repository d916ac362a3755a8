"""
Data models for the Black Duck scan wrapper.

Plain dataclasses and enums describing a single, validated scan request.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ProjectType(Enum):
    """Project types supported by the wrapper"""
    NPM = "npm"
    MAVEN = "maven"
    IOS = "ios"
    ANDROID = "android"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


class VersionPhase(Enum):
    """Black Duck project version phases"""
    PLANNING = "PLANNING"
    DEVELOPMENT = "DEVELOPMENT"
    PRERELEASE = "PRERELEASE"
    RELEASED = "RELEASED"
    DEPRECATED = "DEPRECATED"
    ARCHIVED = "ARCHIVED"


LATEST_VERSION = "latest"


@dataclass(frozen=True)
class ScanOptions:
    """Validated options for one Detect run"""
    project_type: ProjectType
    project_name: str
    version: str = LATEST_VERSION
    source_path: str = "."
    log_level: str = "INFO"
    detect_search_depth: str = "0"
    detect_project_version_phase: str = VersionPhase.DEVELOPMENT.value
    detect_code_location_classifier: Optional[str] = None
    detect_maven_excluded_scopes: str = "test"
    detect_maven_profiles: Optional[str] = None
    detect_maven_projects: Optional[str] = None
    detect_gradle_project: Optional[str] = None
    detect_gradle_configuration: Optional[str] = "releaseRuntimeClasspath"
    enable_signature_scan: bool = False
    detect_excluded_directories: str = "/collections/,/portals/"
    fail: bool = False

    @property
    def code_location_suffix(self) -> str:
        """Suffix appended to the code location name, e.g. '-abc'."""
        if self.detect_code_location_classifier:
            return f"-{self.detect_code_location_classifier}"
        return ""

    @property
    def code_location_name(self) -> str:
        return f"{self.project_name}-{self.version}{self.code_location_suffix}"


@dataclass(frozen=True)
class HubCredentials:
    """Black Duck server location and API token"""
    url: str = ""
    api_token: str = ""

    def masked_token(self) -> str:
        if not self.api_token:
            return ""
        return "****" + self.api_token[-4:] if len(self.api_token) > 8 else "****"
