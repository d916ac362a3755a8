"""
Exceptions raised while validating options and launching Detect.

Every error is fatal for the wrapper: the scan service reports it with an
``ERROR:`` prefix and exits with the status chosen by ``--fail``.

Each exception includes:
- Clear error message
- The offending option, when there is one
- Suggested user action
- Original exception preserved for debugging
"""

from typing import Optional


class ScanWrapperError(Exception):
    """
    Base exception for all wrapper errors.

    ``message`` keeps the short human-readable text; ``str(error)`` adds the
    suggested action and the original exception when present.
    """

    def __init__(
        self,
        message: str,
        option: Optional[str] = None,
        suggested_action: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.message = message
        self.option = option
        self.suggested_action = suggested_action
        self.original_exception = original_exception

        error_parts = [message]

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class MissingRequiredOption(ScanWrapperError):
    """Raised when a required option such as --projectType is not given."""

    def __init__(self, option: str):
        super().__init__(
            message=f"Missing required value for '{option}'",
            option=option,
            suggested_action="Run with --help to list the required options",
        )


class UnsupportedProjectType(ScanWrapperError):
    """Raised when --projectType is not one of the supported project types."""

    def __init__(self, project_type: Optional[str], valid_types: list):
        self.project_type = project_type
        super().__init__(
            message=f"Unsupported project type: {project_type}. Valid options: [{', '.join(valid_types)}].",
            option="projectType",
        )


class InvalidSourcePath(ScanWrapperError):
    """Raised when --sourcePath does not exist."""

    def __init__(self, source_path: str):
        self.source_path = source_path
        super().__init__(
            message=f"Invalid source path provided: {source_path}.",
            option="sourcePath",
        )


class MissingFlagValue(ScanWrapperError):
    """Raised when a flag is followed by nothing, or by another flag."""

    def __init__(self, flag: str):
        super().__init__(
            message=f"Missing parameter value for argument {flag}",
            option=flag,
        )


class UnsupportedFlag(ScanWrapperError):
    """Raised for unrecognized flags and stray positional arguments."""

    def __init__(self, flag: str):
        super().__init__(
            message=f"Unsupported option {flag}",
            option=flag,
            suggested_action="Run with --help to list the supported options",
        )


class ScanInvocationError(ScanWrapperError):
    """
    Raised when the Detect bootstrap script cannot be fetched or started.

    This typically indicates:
    - Network connectivity issues or a proxy blocking the download
    - The script URL moved or returned an error status
    - ``bash`` is not available on the PATH
    """

    def __init__(
        self,
        message: str,
        script_url: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.script_url = script_url
        suggested_action = None
        if script_url:
            suggested_action = f"Check that {script_url} is reachable"
        super().__init__(
            message=message,
            suggested_action=suggested_action,
            original_exception=original_exception,
        )
