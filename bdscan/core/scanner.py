"""
Scanner service implementation for bdscan.

Runs the linear flow parse -> validate -> build -> invoke and applies the
exit status policy: failures exit 0 unless ``--fail`` was given.
"""
import logging
from typing import Any, Dict, List, Optional

import yaml

from bdscan.core.command_builder import DetectCommandBuilder
from bdscan.core.config_manager import ConfigManager
from bdscan.core.detect_runner import DetectRunner
from bdscan.core.options import collect_raw_options, failure_exit_status, reject_extra_args
from bdscan.core.validator import OptionValidator
from bdscan.models import HubCredentials, ScanOptions
from bdscan.rich_utils.ui_helpers import Reporter
from bdscan.utils.exceptions import ScanWrapperError

logger = logging.getLogger(__name__)


class ScanService:
    """Validates options and launches one Detect scan."""

    def __init__(self, reporter: Optional[Reporter] = None):
        self.reporter = reporter or Reporter()
        self.config_manager = ConfigManager()
        self.validator = OptionValidator(self.reporter)

    def load_config(self) -> dict:
        try:
            return self.config_manager.discover_and_load_config()
        except (OSError, yaml.YAMLError) as e:
            raise ScanWrapperError("Could not load configuration", original_exception=e)

    def resolve_credentials(self, config: dict) -> HubCredentials:
        credentials = self.config_manager.resolve_credentials(config)
        if not credentials.url:
            self.reporter.warn("Black Duck URL is not set (BLACKDUCK_URL)")
        if not credentials.api_token:
            self.reporter.warn("Black Duck API token is not set (BLACKDUCK_API_TOKEN)")
        return credentials

    def validate_options(
        self,
        values: Dict[str, Optional[str]],
        extra_args: List[str],
        enable_signature_scan: bool,
        fail: bool,
    ) -> ScanOptions:
        """Check raw flag values, then validate them into ScanOptions."""
        raw: Dict[str, Any] = collect_raw_options(values)
        reject_extra_args(extra_args)
        raw["enable_signature_scan"] = enable_signature_scan
        raw["fail"] = fail
        return self.validator.validate(raw)

    def perform_scan(self, options: ScanOptions) -> int:
        config = self.load_config()
        credentials = self.resolve_credentials(config)

        builder = DetectCommandBuilder(credentials)
        arguments = builder.build(options)

        self.reporter.info("Proceeding with Blackduck scan")
        logger.debug("Detect arguments: %s", builder.format_for_display(arguments))

        runner = DetectRunner.from_config(config)
        return runner.run(arguments)

    def execute_scan(
        self,
        values: Dict[str, Optional[str]],
        extra_args: Optional[List[str]] = None,
        enable_signature_scan: bool = False,
        fail: bool = False,
    ) -> int:
        """Execute the scan workflow and return the process exit code."""
        try:
            options = self.validate_options(values, extra_args or [], enable_signature_scan, fail)
            return self.perform_scan(options)
        except ScanWrapperError as e:
            self.reporter.report_error(e)
            return failure_exit_status(fail)
