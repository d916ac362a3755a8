"""
Utility modules for bdscan.

This package contains the exception hierarchy shared by the option
validator, the command builder and the Detect runner.
"""

from bdscan.utils.exceptions import (
    InvalidSourcePath,
    MissingFlagValue,
    MissingRequiredOption,
    ScanInvocationError,
    ScanWrapperError,
    UnsupportedFlag,
    UnsupportedProjectType,
)

__all__ = [
    "ScanWrapperError",
    "MissingRequiredOption",
    "UnsupportedProjectType",
    "InvalidSourcePath",
    "MissingFlagValue",
    "UnsupportedFlag",
    "ScanInvocationError",
]
