"""
End-to-end tests for the bdscan command line.

Detect itself is never started: DetectRunner.run is patched and the
arguments it receives are inspected instead.

Run with: pytest tests/test_cli.py -xvs
"""

import os
from unittest.mock import patch

import click
import pytest
import typer
from typer.testing import CliRunner

from bdscan.cli import app as entry_point
from bdscan.cli.app import app
from bdscan.core.detect_runner import DetectRunner

runner = CliRunner()


@pytest.fixture(autouse=True)
def scan_environment(tmp_path, monkeypatch):
    """Run every test in an empty directory with credentials set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BDSCAN_CONFIG", raising=False)
    with patch.dict(os.environ, {
        "BLACKDUCK_URL": "https://hub.example.com",
        "BLACKDUCK_API_TOKEN": "token-abcdef-9876",
    }):
        yield tmp_path


@pytest.fixture
def mock_detect():
    with patch.object(DetectRunner, "run", return_value=0) as mock_run:
        yield mock_run


class TestScanCommand:
    """Test cases for successful scans"""

    def test_maven_scan(self, mock_detect):
        result = runner.invoke(app, ["--projectType", "maven", "--projectName", "foo", "--version", "1.0"])

        assert result.exit_code == 0
        arguments = mock_detect.call_args[0][0]
        assert "--detect.project.version.name=1.0" in arguments
        assert "--detect.project.version.phase=PRERELEASE" in arguments
        assert "--detect.included.detector.types=MAVEN" in arguments
        assert "--detect.maven.excluded.scopes=test" in arguments
        assert "--blackduck.url=https://hub.example.com" in arguments
        assert "INFO: Validating program options" in result.output
        assert "INFO: Proceeding with Blackduck scan" in result.output

    def test_npm_signature_scan(self, mock_detect):
        result = runner.invoke(app, ["--projectType", "npm", "--projectName", "bar", "--enableSignatureScan"])

        assert result.exit_code == 0
        arguments = mock_detect.call_args[0][0]
        assert "--detect.tools=DETECTOR,SIGNATURE_SCAN" in arguments
        assert "--detect.excluded.directories=/collections/,/portals/" in arguments
        assert "--detect.project.version.phase=DEVELOPMENT" in arguments

    def test_android_with_options(self, mock_detect, scan_environment):
        source = scan_environment / "android"
        source.mkdir()

        result = runner.invoke(app, [
            "--projectType", "android",
            "--projectName", "mobile",
            "--sourcePath", str(source),
            "--detectGradleProject", "app",
            "--detectCodeLocationClassifier", "arm64",
            "--detectSearchDepth", "2",
        ])

        assert result.exit_code == 0
        arguments = mock_detect.call_args[0][0]
        assert f"--detect.source.path={source}" in arguments
        assert "--detect.gradle.included.projects=app" in arguments
        assert "--detect.code.location.name=mobile-latest-arm64" in arguments
        assert "--detect.detector.search.depth=2" in arguments

    def test_detect_exit_status_propagated(self, mock_detect):
        mock_detect.return_value = 5

        result = runner.invoke(app, ["--projectType", "ios", "--projectName", "app"])

        assert result.exit_code == 5

    def test_missing_credentials_warn(self, mock_detect):
        with patch.dict(os.environ, {}, clear=True):
            result = runner.invoke(app, ["--projectType", "ios", "--projectName", "app"])

        assert result.exit_code == 0
        assert "WARN: Black Duck URL is not set" in result.output
        assert "WARN: Black Duck API token is not set" in result.output
        mock_detect.assert_called_once()

    def test_help(self, mock_detect):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "projectType" in result.output
        mock_detect.assert_not_called()


class TestScanCommandErrors:
    """Test cases for validation failures and the --fail exit policy"""

    def test_unsupported_flag(self, mock_detect):
        result = runner.invoke(app, ["--projectType", "npm", "--projectName", "bar", "--foo", "bar"])

        assert result.exit_code == 0
        assert "ERROR: Unsupported option --foo" in result.output
        mock_detect.assert_not_called()

    def test_unsupported_flag_with_fail(self, mock_detect):
        result = runner.invoke(app, ["--fail", "--projectType", "npm", "--projectName", "bar", "--foo", "bar"])

        assert result.exit_code == 1
        mock_detect.assert_not_called()

    def test_missing_project_type(self, mock_detect):
        result = runner.invoke(app, ["--projectName", "bar"])

        assert result.exit_code == 0
        assert "ERROR: Missing required value for 'projectType'" in result.output
        mock_detect.assert_not_called()

    def test_missing_project_name_with_fail(self, mock_detect):
        result = runner.invoke(app, ["--projectType", "npm", "--fail"])

        assert result.exit_code == 1
        assert "ERROR: Missing required value for 'projectName'" in result.output

    def test_unsupported_project_type(self, mock_detect):
        result = runner.invoke(app, ["--projectType", "pip", "--projectName", "bar", "--fail"])

        assert result.exit_code == 1
        assert "ERROR: Unsupported project type: pip" in result.output
        mock_detect.assert_not_called()

    def test_invalid_source_path(self, mock_detect):
        result = runner.invoke(app, ["--projectType", "npm", "--projectName", "bar", "--sourcePath", "nowhere"])

        assert result.exit_code == 0
        assert "ERROR: Invalid source path provided: nowhere." in result.output
        mock_detect.assert_not_called()

    def test_flag_followed_by_flag(self, mock_detect):
        result = runner.invoke(app, ["--projectType", "npm", "--projectName", "--version", "1.0"])

        assert result.exit_code == 0
        assert "ERROR: Missing parameter value for argument --projectName" in result.output
        mock_detect.assert_not_called()

    def test_bad_config_file(self, mock_detect, scan_environment):
        with patch.dict(os.environ, {"BDSCAN_CONFIG": str(scan_environment / "missing.yaml")}):
            result = runner.invoke(app, ["--projectType", "npm", "--projectName", "bar", "--fail"])

        assert result.exit_code == 1
        assert "ERROR: Could not load configuration" in result.output
        mock_detect.assert_not_called()


class TestEntryPoint:
    """Test cases for the console script entry point"""

    def test_trailing_flag_without_value(self, mock_detect, capsys):
        with pytest.raises(SystemExit) as exc_info:
            entry_point(["--projectType", "npm", "--projectName"])

        assert exc_info.value.code == 0
        assert "ERROR: Missing parameter value for argument --projectName" in capsys.readouterr().err
        mock_detect.assert_not_called()

    def test_trailing_flag_without_value_with_fail(self, mock_detect):
        with pytest.raises(SystemExit) as exc_info:
            entry_point(["--fail", "--projectType"])

        assert exc_info.value.code == 1
        mock_detect.assert_not_called()

    def test_success_exits_zero(self, mock_detect):
        with pytest.raises(SystemExit) as exc_info:
            entry_point(["--projectType", "ios", "--projectName", "app"])

        assert exc_info.value.code == 0
        mock_detect.assert_called_once()

    def test_help_exits_zero(self, mock_detect, capsys):
        with pytest.raises(SystemExit) as exc_info:
            entry_point(["--help"])

        assert exc_info.value.code == 0
        assert "projectType" in capsys.readouterr().out

    def test_unknown_flag_reported_before_later_missing_value(self, mock_detect, capsys):
        with pytest.raises(SystemExit) as exc_info:
            entry_point(["--projectType", "npm", "--foo", "x", "--projectName", "--version", "1"])

        assert exc_info.value.code == 0
        err = capsys.readouterr().err
        assert "ERROR: Unsupported option --foo" in err
        assert "Missing parameter value" not in err
        mock_detect.assert_not_called()

    def test_switch_with_attached_value(self, mock_detect, capsys):
        with pytest.raises(SystemExit) as exc_info:
            entry_point(["--projectType", "npm", "--projectName", "bar", "--enableSignatureScan=yes"])

        assert exc_info.value.code == 0
        assert "ERROR: Unsupported option --enableSignatureScan=yes" in capsys.readouterr().err
        mock_detect.assert_not_called()

    def test_switch_with_attached_value_with_fail(self, mock_detect):
        with pytest.raises(SystemExit) as exc_info:
            entry_point(["--fail", "--projectType", "npm", "--projectName", "bar", "--enableSignatureScan=yes"])

        assert exc_info.value.code == 1
        mock_detect.assert_not_called()

    @pytest.mark.parametrize("usage_error_type", [click.BadOptionUsage, typer.BadParameter.__mro__[1]])
    def test_usage_error_from_typer_reported(self, usage_error_type, capsys):
        if usage_error_type is click.BadOptionUsage:
            error = click.BadOptionUsage("--projectType", "Option '--projectType' requires an argument.")
        else:
            error = usage_error_type("Got unexpected extra argument (x)")

        with patch("bdscan.cli._app", side_effect=error):
            with pytest.raises(SystemExit) as exc_info:
                entry_point(["--fail", "--projectType", "npm"])

        assert exc_info.value.code == 1
        assert "ERROR:" in capsys.readouterr().err
