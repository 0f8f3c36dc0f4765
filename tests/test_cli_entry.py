import json

import pytest

import vedur_weather.__main__ as cli
from vedur_weather.service import usecase


def test_cli_forecasts_prints_envelope(monkeypatch, capsys, make_transport, forecast_xml):
    transport = make_transport(forecast_xml)
    monkeypatch.setattr(usecase, "_default_transport", transport)

    code = cli.run(["forecasts", "--stations", "1", "--lang", "en", "--descriptions"])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["results"][0]["id"] == "1"
    assert payload["descriptions"]["F"] == "Wind speed (m/s)"
    assert "lang=en" in transport.urls[0]


def test_cli_observations_passes_extras(monkeypatch, capsys, make_transport, observation_xml):
    transport = make_transport(observation_xml)
    monkeypatch.setattr(usecase, "_default_transport", transport)

    assert cli.run(["--compact", "observations", "--stations", "1", "--time", "3h", "--anytime", "0"]) == 0
    assert transport.urls[0].endswith("&time=3h&anytime=0")
    assert len(capsys.readouterr().out.strip().splitlines()) == 1


def test_cli_stations(monkeypatch, capsys, make_transport, station_html):
    monkeypatch.setattr(usecase, "_default_transport", make_transport(station_html))

    assert cli.run(["stations"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["results"][0] == {"name": "Reykjavík", "id": "1"}


def test_cli_reports_errors(monkeypatch, capsys, make_transport):
    monkeypatch.setattr(usecase, "_default_transport", make_transport("<texts>"))

    assert cli.run(["texts", "--types", "5"]) == 1
    assert "error:" in capsys.readouterr().err


def test_cli_info(capsys):
    assert cli.run(["info"]) == 0
    assert "endpoints" in json.loads(capsys.readouterr().out)["results"][0]


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.run(["--version"])
    assert exc.value.code == 0
    assert "0.1.0" in capsys.readouterr().out
