"""Tests for the Typer CLI."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from cli import doctor
from cli import main as cli_main
from core.domain.errors import TransportError

runner = CliRunner()


@pytest.fixture
def use_source(monkeypatch, stub_source):
    """Replace the HTTP fetcher used by the CLI with a canned source."""

    created: list[dict] = []

    def install(*results):
        source = stub_source(*results)

        def factory(settings, *, url=None):
            created.append({"settings": settings, "url": url})
            return source

        monkeypatch.setattr(cli_main, "ClientApiFetcher", factory)
        return created

    return install


def test_list_prints_table(use_source, sample_body):
    use_source(sample_body)

    result = runner.invoke(cli_main.app, ["list"])

    assert result.exit_code == 0, result.output
    assert "Alice" in result.output
    assert "Bob" in result.output
    assert "2 of 2 clients" in result.output


def test_list_filters_managers(use_source, mixed_body):
    use_source(mixed_body)

    result = runner.invoke(cli_main.app, ["list", "--filter", "managers"])

    assert result.exit_code == 0, result.output
    assert "Manager A" in result.output
    assert "Worker B" not in result.output
    assert "2 of 4 clients" in result.output


def test_list_json_uses_wire_field_names(use_source, sample_body):
    use_source(sample_body)

    result = runner.invoke(cli_main.app, ["list", "--json", "--filter", "non-managers"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [
        {"id": 2, "label": "Bob", "isManager": False, "name": "", "address": "", "points": 0}
    ]


def test_list_passes_url_override(use_source, sample_body):
    created = use_source(sample_body)

    result = runner.invoke(cli_main.app, ["list", "--json", "--url", "https://other.test/clients"])

    assert result.exit_code == 0, result.output
    assert created[0]["url"] == "https://other.test/clients"


def test_list_reports_transport_error(use_source):
    use_source(TransportError("HTTP 503 Service Unavailable", status_code=503))

    result = runner.invoke(cli_main.app, ["list"])

    assert result.exit_code == 1
    assert "Failed to load clients" in result.output
    assert "HTTP 503" in result.output


def test_list_reports_parse_error(use_source):
    use_source('{"label": "no clients here"}')

    result = runner.invoke(cli_main.app, ["list"])

    assert result.exit_code == 1
    assert "Failed to load clients" in result.output


def test_list_rejects_unknown_filter(use_source, sample_body):
    use_source(sample_body)

    result = runner.invoke(cli_main.app, ["list", "--filter", "supervisors"])

    assert result.exit_code != 0


def test_show_prints_detail_panel(use_source, sample_body):
    use_source(sample_body)

    result = runner.invoke(cli_main.app, ["show", "1"])

    assert result.exit_code == 0, result.output
    assert "Name: Alice A." in result.output
    assert "Address: 1 Rd" in result.output
    assert "Points: 50" in result.output


def test_show_client_without_details(use_source, sample_body):
    use_source(sample_body)

    result = runner.invoke(cli_main.app, ["show", "2"])

    assert result.exit_code == 0, result.output
    assert "Points: 0" in result.output


def test_show_unknown_client(use_source, sample_body):
    use_source(sample_body)

    result = runner.invoke(cli_main.app, ["show", "99"])

    assert result.exit_code == 1
    assert "No client with id 99" in result.output


def test_doctor_run_reports_connectivity(monkeypatch):
    async def fake_check(url, settings):
        return True, "HTTP 200"

    monkeypatch.setattr(doctor, "_check_http", fake_check)

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "HTTP 200" in result.output
    assert "FAIL" not in result.output


def test_doctor_run_suggests_fix_on_failure(monkeypatch):
    async def fake_check(url, settings):
        return False, "connection refused"

    monkeypatch.setattr(doctor, "_check_http", fake_check)

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "FAIL" in result.output
    assert "set-endpoint" in result.output


def test_doctor_set_endpoint_writes_user_env(monkeypatch, tmp_path):
    monkeypatch.setattr("core.config.get_user_config_dir", lambda: tmp_path)

    result = runner.invoke(cli_main.app, ["doctor", "set-endpoint", "https://clients.example.test/api"])

    assert result.exit_code == 0, result.output
    content = (tmp_path / ".env").read_text(encoding="utf-8")
    assert "CLIENT_ROSTER_CLIENTS_URL=https://clients.example.test/api" in content


def test_doctor_set_endpoint_rejects_non_http(monkeypatch, tmp_path):
    monkeypatch.setattr("core.config.get_user_config_dir", lambda: tmp_path)

    result = runner.invoke(cli_main.app, ["doctor", "set-endpoint", "ftp://clients.example.test"])

    assert result.exit_code != 0
    assert not (tmp_path / ".env").exists()
