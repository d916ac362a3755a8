"""
Scan command implementation.

Thin wrapper around ScanService that handles CLI argument parsing
and delegates business logic to the service layer.
"""
import sys
from typing import Optional

import typer

from bdscan.core.scanner import ScanService


def scan_command(
    ctx: typer.Context,
    project_type: Optional[str] = typer.Option(None, "--projectType", help="(required) maven, npm, ios or android."),
    project_name: Optional[str] = typer.Option(None, "--projectName", help="(required) Project name to be used in Blackduck."),
    version: Optional[str] = typer.Option(None, "--version", help="Version label of the current build. Default: latest."),
    source_path: Optional[str] = typer.Option(
        None, "--sourcePath",
        help="Root path where the scanned artifact is built (e.g. directory of the aggregating pom.xml). Default: '.'.",
    ),
    log_level: Optional[str] = typer.Option(None, "--logLevel", help="Log level for Blackduck detect execution. Default: INFO."),
    detect_search_depth: Optional[str] = typer.Option(
        None, "--detectSearchDepth",
        help="Depth below 'sourcePath' where detectors look for package manager files. Default: 0.",
    ),
    detect_project_version_phase: Optional[str] = typer.Option(
        None, "--detectProjectVersionPhase",
        help="Defaults to DEVELOPMENT when 'version' is latest, PRERELEASE otherwise.",
    ),
    detect_code_location_classifier: Optional[str] = typer.Option(
        None, "--detectCodeLocationClassifier",
        help="Classifier appended to detect.code.location.name, for several scan runs mapped to one version.",
    ),
    detect_maven_excluded_scopes: Optional[str] = typer.Option(None, "--detectMavenExcludedScopes", help="Default: test."),
    detect_maven_profiles: Optional[str] = typer.Option(
        None, "--detectMavenProfiles", help="Additional maven profiles used to build the deliverable. Comma separated, no spaces.",
    ),
    detect_maven_projects: Optional[str] = typer.Option(
        None, "--detectMavenProjects",
        help="Comma separated maven projects considered in dependency:tree, same as maven '-pl' (prefix with ! to exclude).",
    ),
    detect_gradle_project: Optional[str] = typer.Option(None, "--detectGradleProject", help="Filter to a specific gradle project."),
    detect_gradle_configuration: Optional[str] = typer.Option(
        None, "--detectGradleConfiguration", help="Default: releaseRuntimeClasspath.",
    ),
    enable_signature_scan: bool = typer.Option(
        False, "--enableSignatureScan",
        help="npm only. Also run the Blackduck signature scan. Package manager scans are preferred.",
    ),
    detect_excluded_directories: Optional[str] = typer.Option(
        None, "--detectExcludedDirectories",
        help="npm only. Paths skipped by the signature scanner. Default: '/collections/,/portals/'.",
    ),
    fail: bool = typer.Option(
        False, "--fail",
        help="Exit with status 1 instead of 0 on validation failures or abnormal execution.",
    ),
):
    """Run a Black Duck Detect scan for an npm, maven, ios or android project."""

    values = {
        "project_type": project_type,
        "project_name": project_name,
        "version": version,
        "source_path": source_path,
        "log_level": log_level,
        "detect_search_depth": detect_search_depth,
        "detect_project_version_phase": detect_project_version_phase,
        "detect_code_location_classifier": detect_code_location_classifier,
        "detect_maven_excluded_scopes": detect_maven_excluded_scopes,
        "detect_maven_profiles": detect_maven_profiles,
        "detect_maven_projects": detect_maven_projects,
        "detect_gradle_project": detect_gradle_project,
        "detect_gradle_configuration": detect_gradle_configuration,
        "detect_excluded_directories": detect_excluded_directories,
    }

    # Delegate to service layer
    scan_service = ScanService()
    exit_code = scan_service.execute_scan(
        values,
        extra_args=list(ctx.args),
        enable_signature_scan=enable_signature_scan,
        fail=fail,
    )

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
