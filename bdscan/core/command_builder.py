"""
Detect command line assembly.

Maps validated ScanOptions onto the ``--detect.*`` properties understood by
Black Duck Detect. Arguments are produced as a list and handed to the
subprocess unchanged, so values with spaces need no quoting.
"""
from typing import List

from bdscan.models import HubCredentials, ProjectType, ScanOptions
from bdscan.utils.exceptions import UnsupportedProjectType

TOKEN_PROPERTY = "blackduck.api.token"


def detect_property(name: str, value) -> str:
    return f"--{name}={value}"


class DetectCommandBuilder:
    """Builds the Detect argument list for one scan."""

    def __init__(self, credentials: HubCredentials):
        self.credentials = credentials

    def build(self, options: ScanOptions) -> List[str]:
        """Common properties first, then the project-type specific ones."""
        arguments = self.common_arguments(options)

        if options.project_type is ProjectType.MAVEN:
            arguments.extend(self.maven_arguments(options))
        elif options.project_type is ProjectType.NPM:
            arguments.extend(self.npm_arguments(options))
        elif options.project_type is ProjectType.IOS:
            arguments.extend(self.ios_arguments(options))
        elif options.project_type is ProjectType.ANDROID:
            arguments.extend(self.android_arguments(options))
        else:
            raise UnsupportedProjectType(options.project_type, ProjectType.values())

        return arguments

    def common_arguments(self, options: ScanOptions) -> List[str]:
        return [
            detect_property("blackduck.url", self.credentials.url),
            detect_property(TOKEN_PROPERTY, self.credentials.api_token),
            detect_property("logging.level.com.synopsys.integration", options.log_level),
            detect_property("detect.project.name", options.project_name),
            detect_property("detect.project.version.name", options.version),
            detect_property("detect.project.version.phase", options.detect_project_version_phase),
            detect_property("detect.project.version.update", "true"),
            detect_property("detect.source.path", options.source_path),
            detect_property("detect.code.location.name", options.code_location_name),
            detect_property("detect.detector.search.depth", options.detect_search_depth),
            detect_property("detect.excluded.directories.defaults.disabled", "true"),
        ]

    @staticmethod
    def maven_build_command(options: ScanOptions) -> str:
        """Extra maven arguments, e.g. '-pl core,api -Prelease'."""
        parts = []
        if options.detect_maven_projects:
            parts.append(f"-pl {options.detect_maven_projects}")
        if options.detect_maven_profiles:
            parts.append(f"-P{options.detect_maven_profiles}")
        return " ".join(parts)

    def maven_arguments(self, options: ScanOptions) -> List[str]:
        arguments = [
            detect_property("detect.tools", "DETECTOR"),
            detect_property("detect.included.detector.types", "MAVEN"),
            detect_property("detect.maven.excluded.scopes", options.detect_maven_excluded_scopes),
        ]
        build_command = self.maven_build_command(options)
        if build_command:
            arguments.append(detect_property("detect.maven.build.command", build_command))
        return arguments

    def npm_arguments(self, options: ScanOptions) -> List[str]:
        if options.enable_signature_scan:
            arguments = [
                detect_property("detect.tools", "DETECTOR,SIGNATURE_SCAN"),
                detect_property("detect.excluded.directories", options.detect_excluded_directories),
            ]
        else:
            arguments = [detect_property("detect.tools", "DETECTOR")]
        arguments.append(detect_property("detect.excluded.detector.types", "GIT,MAVEN"))
        arguments.append(detect_property("detect.npm.include.dev.dependencies", "false"))
        return arguments

    def ios_arguments(self, options: ScanOptions) -> List[str]:
        return [
            detect_property("detect.tools", "DETECTOR"),
            detect_property("detect.included.detector.types", "cocoapods"),
        ]

    def android_arguments(self, options: ScanOptions) -> List[str]:
        arguments = [
            detect_property("detect.tools", "DETECTOR"),
            detect_property("detect.included.detector.types", "gradle"),
        ]
        if options.detect_gradle_project:
            arguments.append(detect_property("detect.gradle.included.projects", options.detect_gradle_project))
        if options.detect_gradle_configuration:
            arguments.append(
                detect_property("detect.gradle.included.configurations", options.detect_gradle_configuration)
            )
        return arguments

    def format_for_display(self, arguments: List[str]) -> str:
        """Join the arguments for logging with the API token masked."""
        token_prefix = f"--{TOKEN_PROPERTY}="
        shown = []
        for argument in arguments:
            if argument.startswith(token_prefix):
                argument = token_prefix + self.credentials.masked_token()
            shown.append(argument)
        return " ".join(shown)
