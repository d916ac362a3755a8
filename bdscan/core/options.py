"""
Command-line flag table and raw value checks.

Every flag takes exactly one value except the switches ``--fail`` and
``--enableSignatureScan``. A value that is empty or looks like another flag
means the flag was given without its value. Switches never take a value.
"""
from typing import Dict, Iterable, List, Optional

from bdscan.utils.exceptions import MissingFlagValue, UnsupportedFlag

FAIL_FLAG = "--fail"
SIGNATURE_SCAN_FLAG = "--enableSignatureScan"
HELP_FLAG = "--help"

# CLI flag -> ScanOptions field
VALUE_FLAGS: Dict[str, str] = {
    "--projectType": "project_type",
    "--projectName": "project_name",
    "--version": "version",
    "--sourcePath": "source_path",
    "--logLevel": "log_level",
    "--detectSearchDepth": "detect_search_depth",
    "--detectProjectVersionPhase": "detect_project_version_phase",
    "--detectCodeLocationClassifier": "detect_code_location_classifier",
    "--detectMavenExcludedScopes": "detect_maven_excluded_scopes",
    "--detectMavenProfiles": "detect_maven_profiles",
    "--detectMavenProjects": "detect_maven_projects",
    "--detectGradleProject": "detect_gradle_project",
    "--detectGradleConfiguration": "detect_gradle_configuration",
    "--detectExcludedDirectories": "detect_excluded_directories",
}

SWITCH_FLAGS: Dict[str, str] = {
    FAIL_FLAG: "fail",
    SIGNATURE_SCAN_FLAG: "enable_signature_scan",
}

FIELD_FLAGS: Dict[str, str] = {field: flag for flag, field in {**VALUE_FLAGS, **SWITCH_FLAGS}.items()}


def parse_option(flag: str, value: Optional[str]) -> str:
    """Return the value given for ``flag`` or raise MissingFlagValue."""
    if not value or value.startswith("-"):
        raise MissingFlagValue(flag)
    return value


def collect_raw_options(values: Dict[str, Optional[str]]) -> Dict[str, str]:
    """
    Check the values of the flags that were actually given.

    Args:
        values: ScanOptions field name -> raw value, None when the flag was absent

    Returns:
        Only the given fields, each value checked with ``parse_option``
    """
    raw = {}
    for field, value in values.items():
        if value is None:
            continue
        raw[field] = parse_option(FIELD_FLAGS[field], value)
    return raw


def reject_extra_args(args: List[str]) -> None:
    """Anything the CLI layer could not match is an unsupported option."""
    if args:
        raise UnsupportedFlag(args[0])


def wants_failure_status(argv: Iterable[str]) -> bool:
    """True when ``--fail`` appears anywhere on the command line."""
    return FAIL_FLAG in argv


def check_command_line(argv: Iterable[str]) -> None:
    """
    Walk the command line left to right and stop at the first bad token.

    Raises:
        UnsupportedFlag: unknown flag, stray positional, or a switch given a value
        MissingFlagValue: a value flag followed by nothing or by another flag
    """
    tokens = list(argv)
    position = 0
    while position < len(tokens):
        token = tokens[position]
        flag, has_value, attached = token.partition("=")
        if token == HELP_FLAG:
            position += 1
        elif flag in SWITCH_FLAGS:
            if has_value:
                raise UnsupportedFlag(token)
            position += 1
        elif flag in VALUE_FLAGS:
            if has_value:
                parse_option(flag, attached)
                position += 1
            else:
                following = tokens[position + 1] if position + 1 < len(tokens) else None
                parse_option(flag, following)
                position += 2
        else:
            raise UnsupportedFlag(token)


def failure_exit_status(fail: bool) -> int:
    """Exit status for validation and operational failures."""
    return 1 if fail else 0
