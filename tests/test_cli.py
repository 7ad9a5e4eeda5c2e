"""Tests for the command-line interface."""

import io
import logging
import os
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from click.testing import CliRunner

from pages import DOCUMENT_HTML, DOCUMENT_URL, VIDEO_HTML, VIDEO_URL
from wwdcparser import __version__
from wwdcparser.cli.main import main
from wwdcparser.logger import setup_logger
from wwdcparser.models import ConversionResult, FetchConfig

_RealAsyncClient = httpx.AsyncClient


def test_legacy_video_invocation():
    """Test `wwdc-parser <video-url>` writes a markdown file to the cwd."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        with patch(
            "wwdcparser.parsers.fetch_html",
            new_callable=AsyncMock,
            return_value=VIDEO_HTML,
        ):
            result = runner.invoke(main, [VIDEO_URL])

        assert result.exit_code == 0, result.output
        assert "Generated markdown file:" in result.output
        assert os.listdir(".") == ["wwdc_video_meet_swiftdata.md"]

        with open("wwdc_video_meet_swiftdata.md", encoding="utf-8") as f:
            content = f.read()
        assert "# Meet SwiftData" in content
        assert "SwiftData is a powerful and expressive" in content


def test_document_invocation():
    """Test `wwdc-parser --content-type document <url>`."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        with patch(
            "wwdcparser.parsers.fetch_html",
            new_callable=AsyncMock,
            return_value=DOCUMENT_HTML,
        ):
            result = runner.invoke(
                main, ["--content-type", "document", "-o", "out", DOCUMENT_URL]
            )

        assert result.exit_code == 0, result.output
        assert os.listdir("out") == ["wwdc_doc_swiftui.md"]


def test_unreachable_url_exits_non_zero():
    """Test that a connection failure exits with an error and writes nothing."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    def make_client(**kwargs):
        return _RealAsyncClient(transport=httpx.MockTransport(handler), **kwargs)

    runner = CliRunner()
    with runner.isolated_filesystem():
        with patch("wwdcparser.http_utils.httpx.AsyncClient", side_effect=make_client):
            result = runner.invoke(main, [VIDEO_URL])

        assert result.exit_code == 1
        assert os.listdir(".") == []


def test_missing_content_exits_non_zero():
    """Test that a page without the expected content exits with an error."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        with patch(
            "wwdcparser.parsers.fetch_html",
            new_callable=AsyncMock,
            return_value="<html></html>",
        ):
            result = runner.invoke(main, ["-c", "video", VIDEO_URL])

        assert result.exit_code == 1
        assert os.listdir(".") == []


def test_rejects_non_apple_url():
    """Test URL validation."""
    runner = CliRunner()
    result = runner.invoke(main, ["https://example.com/videos/play/wwdc2023/1/"])

    assert result.exit_code == 2
    assert "developer.apple.com" in result.output


def test_rejects_invalid_content_type():
    """Test content type choices."""
    runner = CliRunner()
    result = runner.invoke(main, ["--content-type", "podcast", VIDEO_URL])

    assert result.exit_code == 2


def test_version():
    """Test the version option."""
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def _result() -> ConversionResult:
    return ConversionResult(
        title="Meet SwiftData",
        content_type="video",
        source_url=VIDEO_URL,
        markdown_path="wwdc_video_meet_swiftdata.md",
    )


@pytest.mark.parametrize(
    ("flags", "expected_level"),
    [
        ([], logging.WARNING),
        (["-v"], logging.DEBUG),
        (["--verbose"], logging.DEBUG),
        (["-q"], logging.ERROR),
        (["--quiet"], logging.ERROR),
    ],
)
def test_log_level_flags(flags: list[str], expected_level: int):
    """Test that verbosity flags select the log level."""
    runner = CliRunner()
    with (
        patch("wwdcparser.cli.main.setup_logger") as mock_setup,
        patch(
            "wwdcparser.cli.main.convert_content",
            new_callable=AsyncMock,
            return_value=_result(),
        ),
    ):
        result = runner.invoke(main, [*flags, VIDEO_URL])

    assert result.exit_code == 0, result.output
    mock_setup.assert_called_once()
    assert mock_setup.call_args.kwargs["level"] == expected_level
    assert mock_setup.call_args.kwargs["log_file"] is None


def test_log_file_option_writes_log():
    """Test that --log-file receives the run's log records."""
    runner = CliRunner()
    with runner.isolated_filesystem():
        with patch(
            "wwdcparser.parsers.fetch_html",
            new_callable=AsyncMock,
            return_value=VIDEO_HTML,
        ):
            result = runner.invoke(main, ["-v", "--log-file", "run.log", VIDEO_URL])

        # Close the file handler before reading the log
        setup_logger(level=logging.WARNING, file_stream=io.StringIO())

        assert result.exit_code == 0, result.output
        with open("run.log", encoding="utf-8") as f:
            log = f.read()
        assert f"Converting video page: {VIDEO_URL}" in log
        assert "DEBUG" in log


def test_timeout_option_reaches_fetch_config():
    """Test that --timeout is passed on as the fetch configuration."""
    runner = CliRunner()
    with patch(
        "wwdcparser.cli.main.convert_content",
        new_callable=AsyncMock,
        return_value=_result(),
    ) as mock_convert:
        result = runner.invoke(main, ["--timeout", "5", VIDEO_URL])

    assert result.exit_code == 0, result.output
    kwargs = mock_convert.call_args.kwargs
    assert kwargs["config"] == FetchConfig(timeout=5.0)
    assert kwargs["content_type"] is None
    assert kwargs["output_dir"] is None


def test_default_timeout():
    """Test the default fetch timeout."""
    runner = CliRunner()
    with patch(
        "wwdcparser.cli.main.convert_content",
        new_callable=AsyncMock,
        return_value=_result(),
    ) as mock_convert:
        result = runner.invoke(main, [VIDEO_URL])

    assert result.exit_code == 0, result.output
    assert mock_convert.call_args.kwargs["config"].timeout == 30.0


def test_rejects_non_positive_timeout():
    """Test timeout validation."""
    runner = CliRunner()
    result = runner.invoke(main, ["--timeout", "0", VIDEO_URL])

    assert result.exit_code == 2


@pytest.mark.parametrize(
    "url",
    [
        "https://developer.apple.com:443/videos/play/wwdc2023/10187/",
        "https://Developer.Apple.com/videos/play/wwdc2023/10187/",
    ],
)
def test_accepts_apple_host_variants(url: str):
    """Test that an explicit port or mixed-case host is accepted."""
    runner = CliRunner()
    with patch(
        "wwdcparser.cli.main.convert_content",
        new_callable=AsyncMock,
        return_value=_result(),
    ) as mock_convert:
        result = runner.invoke(main, [url])

    assert result.exit_code == 0, result.output
    assert mock_convert.call_args.kwargs["url"] == url
