"""
Runs Black Duck Detect through its bootstrap script.

The script is downloaded on every run, written to a temporary directory and
executed with bash. Output is not captured: Detect writes straight to the
terminal and its exit status becomes the wrapper's result.
"""
import logging
import os
import subprocess
import tempfile
from pathlib import Path
from typing import List

import requests

from bdscan.utils.exceptions import ScanInvocationError

logger = logging.getLogger(__name__)

DEFAULT_SCRIPT_URL = "https://detect.synopsys.com/detect.sh"
DEFAULT_LATEST_RELEASE_VERSION = "7.1.0"
RELEASE_VERSION_ENV_VAR = "DETECT_LATEST_RELEASE_VERSION"


class DetectRunner:
    """Fetches the Detect bootstrap script and executes it."""

    def __init__(
        self,
        script_url: str = DEFAULT_SCRIPT_URL,
        latest_release_version: str = DEFAULT_LATEST_RELEASE_VERSION,
    ):
        self.script_url = script_url
        self.latest_release_version = latest_release_version

    @classmethod
    def from_config(cls, config: dict) -> "DetectRunner":
        section = config.get("detect") or {}
        return cls(
            script_url=section.get("script_url") or DEFAULT_SCRIPT_URL,
            latest_release_version=str(section.get("latest_release_version") or DEFAULT_LATEST_RELEASE_VERSION),
        )

    def fetch_script(self) -> str:
        """Download the bootstrap script, following redirects."""
        try:
            response = requests.get(self.script_url, allow_redirects=True)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise ScanInvocationError(
                "Failed to download the Detect bootstrap script",
                script_url=self.script_url,
                original_exception=e,
            )
        logger.debug("Downloaded %d bytes from %s", len(response.text), self.script_url)
        return response.text

    def build_environment(self) -> dict:
        env = os.environ.copy()
        env[RELEASE_VERSION_ENV_VAR] = self.latest_release_version
        return env

    def run(self, arguments: List[str]) -> int:
        """Run Detect with ``arguments`` and return its exit status."""
        script = self.fetch_script()

        with tempfile.TemporaryDirectory(prefix="bdscan-") as work_dir:
            script_path = Path(work_dir) / "detect.sh"
            script_path.write_text(script)

            try:
                completed = subprocess.run(
                    ["bash", str(script_path), *arguments],
                    env=self.build_environment(),
                    check=False,
                )
            except OSError as e:
                raise ScanInvocationError(
                    "Failed to launch the Detect bootstrap script",
                    script_url=self.script_url,
                    original_exception=e,
                )

        logger.debug("Detect finished with exit status %d", completed.returncode)
        return completed.returncode
