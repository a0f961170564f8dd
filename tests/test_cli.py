"""Tests for the statoo command."""
import json

import httpx
import pytest
from click.testing import CliRunner

from statoo import __version__
from statoo.cli import statoo
from statoo.config import Settings, set_settings

from helpers import TEST_URL, RecordingTransport, text_response


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def server(patch_transport, hello_transport) -> RecordingTransport:
    """Route every CLI request to the hello world transport."""
    patch_transport(hello_transport)
    return hello_transport


def test_version(runner, server):
    result = runner.invoke(statoo, ["-version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == __version__
    assert server.requests == []


def test_version_wins_over_url(runner, server):
    result = runner.invoke(statoo, ["-version", TEST_URL])

    assert result.stdout.strip() == __version__
    assert server.requests == []


def test_commithash(runner, server):
    set_settings(Settings(commit_hash="abc1234"))

    result = runner.invoke(statoo, ["-commithash"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "abc1234"


def test_bash_completion(runner, server):
    result = runner.invoke(statoo, ["bash-completion"])

    assert result.exit_code == 0
    assert "__statoo_comp()" in result.stdout
    assert "complete -F __statoo_comp statoo" in result.stdout
    assert server.requests == []


def test_no_url_prints_usage(runner, server):
    result = runner.invoke(statoo, [])

    assert result.exit_code == 0
    assert "Usage:" in result.stdout
    assert "-request-header" in result.stdout
    assert server.requests == []


@pytest.mark.parametrize("flag", ["-h", "-help", "--help"])
def test_help_flags(runner, flag):
    result = runner.invoke(statoo, [flag])

    assert result.exit_code == 0
    assert "Examples:" in result.stdout


def test_status_code(runner, server):
    result = runner.invoke(statoo, [TEST_URL])

    assert result.exit_code == 0
    assert result.stdout == "200\n"
    assert len(server.requests) == 1


def test_verbose(runner, server):
    result = runner.invoke(statoo, ["-verbose", TEST_URL])
    assert result.stdout == f"{TEST_URL} -> 200\n"


def test_error_status_exits_zero(runner, patch_transport):
    patch_transport(RecordingTransport(lambda r: text_response(status=404)))

    result = runner.invoke(statoo, [TEST_URL])

    assert result.exit_code == 0
    assert result.stdout == "404\n"


def test_json_find(runner, server):
    result = runner.invoke(statoo, ["-j", "-f", "hello", TEST_URL])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["url"] == TEST_URL
    assert data["length"] == 12
    assert data["found"] is True
    assert data["find"] == "hello"


def test_json_response_headers(runner, server):
    result = runner.invoke(statoo, [
        "-json",
        "-response-header", "Server: FakeServer",
        "-response-header=Foo: bar",
        TEST_URL,
    ])

    data = json.loads(result.stdout)
    assert data["response_headers"] == {"Server=FakeServer": True, "Foo=bar": False}


def test_request_header_and_auth_sent(runner, server):
    result = runner.invoke(statoo, [
        "-request-header", "X-Api-Key: APIKEY",
        "-a", "user:secret",
        "-s",
        "-t", "30",
        TEST_URL,
    ])

    assert result.exit_code == 0
    request = server.requests[0]
    assert request.headers["X-Api-Key"] == "APIKEY"
    assert request.headers["Authorization"].startswith("Basic ")


def test_schemaless_url_fails(runner, server):
    result = runner.invoke(statoo, ["vigo.io"])

    assert result.exit_code == 1
    assert "invalid URI for request" in result.stderr
    assert result.stdout == ""
    assert server.requests == []


@pytest.mark.parametrize("timeout", ["0", "101", "200"])
def test_timeout_out_of_range_fails(runner, server, timeout):
    result = runner.invoke(statoo, ["-timeout", timeout, TEST_URL])

    assert result.exit_code == 1
    assert f"invalid timeout value: {timeout}" in result.stderr
    assert server.requests == []


def test_malformed_request_header_fails(runner, server):
    result = runner.invoke(statoo, ["-request-header", "foo:bar:baz", TEST_URL])

    assert result.exit_code == 1
    assert "invalid request header value: foo:bar:baz" in result.stderr
    assert server.requests == []


def test_malformed_auth_fails(runner, server):
    result = runner.invoke(statoo, ["-auth", "foobar", TEST_URL])

    assert result.exit_code == 1
    assert "invalid basic auth value: foobar" in result.stderr
    assert server.requests == []


def test_network_error_fails(runner, patch_transport):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    patch_transport(RecordingTransport(handler))

    result = runner.invoke(statoo, ["-json", TEST_URL])

    assert result.exit_code == 1
    assert "connection failed" in result.stderr
    assert result.stdout == ""


@pytest.mark.parametrize("timeout", ["abc", "1.5", ""])
def test_non_integer_timeout_fails_with_status_one(runner, server, timeout):
    result = runner.invoke(statoo, ["-t", timeout, TEST_URL])

    assert result.exit_code == 1
    assert f"invalid timeout value: {timeout}" in result.stderr
    assert server.requests == []


def test_json_output_has_no_trailing_newline(runner, server):
    result = runner.invoke(statoo, ["-json", TEST_URL])

    assert result.exit_code == 0
    assert result.stdout.endswith("}")
