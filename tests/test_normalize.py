import pytest

from vedur_weather.domain.errors import SchemaMismatch
from vedur_weather.infra.xml_parser import parse_xml
from vedur_weather.service import normalize


@pytest.mark.parametrize(
    "node, expected",
    [
        (["a"], "a"),
        ([["a"]], "a"),
        (["a", "b"], ["a", "b"]),
        ([], []),
        ({"x": [{"y": ["1"]}], "z": ["1", ["2"]]}, {"x": {"y": "1"}, "z": ["1", "2"]}),
        ("plain", "plain"),
    ],
)
def test_de_arrayfy(node, expected):
    assert normalize.de_arrayfy(node) == expected


def test_de_arrayfy_is_idempotent(forecast_xml, text_xml):
    for body in (forecast_xml, text_xml):
        once = normalize.de_arrayfy(parse_xml(body))
        assert normalize.de_arrayfy(once) == once


def test_fix_decimals_only_touches_strings():
    value = {"T": "12,5", "n": 3, "nested": ["1,2", None]}
    assert normalize.fix_decimals(value) == {"T": "12.5", "n": 3, "nested": ["1.2", None]}


def test_forecasts_flattened_and_fixed_for_icelandic(forecast_xml):
    results = normalize.normalize_forecasts(parse_xml(forecast_xml), "is")

    assert len(results) == 1
    station = results[0]
    assert "$" not in station
    assert station["id"] == "1"
    assert station["valid"] == "1"
    assert station["name"] == "Reykjavík"
    assert station["err"] == ""
    assert [f["T"] for f in station["forecast"]] == ["1.5", "-0.5"]
    assert station["forecast"][0]["W"] == "Skýjað"


def test_forecasts_keep_commas_for_english(forecast_xml):
    station = normalize.normalize_forecasts(parse_xml(forecast_xml), "en")[0]
    assert [f["T"] for f in station["forecast"]] == ["1,5", "-0,5"]


def test_single_forecast_entry_is_fixed():
    tree = {"forecasts": {"station": [{"$": {"id": "1", "valid": "1"}, "forecast": [{"T": ["3,4"]}]}]}}
    station = normalize.normalize_forecasts(tree, "is")[0]
    assert station["forecast"] == {"T": "3.4"}


def test_observations_fixed_for_icelandic(observation_xml):
    results = normalize.normalize_observations(parse_xml(observation_xml), "is")

    assert [r["id"] for r in results] == ["1", "422"]
    assert results[0]["T"] == "2.1"
    assert results[0]["R"] == "0.2"
    assert results[1]["T"] == "-1.3"
    assert all("$" not in r for r in results)


def test_observations_unchanged_for_english(observation_xml):
    results = normalize.normalize_observations(parse_xml(observation_xml), "en")
    assert results[0]["T"] == "2,1"


def test_text_content_markup_is_dropped(text_xml):
    results = normalize.normalize_texts(parse_xml(text_xml))

    assert [r["id"] for r in results] == ["5", "6"]
    assert results[0]["content"] == "Norðaustan 5-10 m/s.Hiti 0 til 5 stig, kaldast norðan til."
    assert results[1]["content"] == "Hæg breytileg átt, 2,5 m/s."


def test_text_content_structured_node():
    tree = {"texts": {"text": [{"$": {"id": "5"}, "content": [{"_": "Clear skies", "br": {}}]}]}}
    assert normalize.normalize_texts(tree) == [{"id": "5", "content": "Clear skies"}]


def test_empty_wrapper_gives_no_results():
    assert normalize.normalize_observations({"observations": None}, "is") == []
    assert normalize.normalize_texts({"texts": {"$": {"lang": "is"}}}) == []


def test_unexpected_root_raises():
    with pytest.raises(SchemaMismatch):
        normalize.normalize_forecasts({"error": ["Unknown station"]}, "is")


def test_record_without_id_raises():
    with pytest.raises(SchemaMismatch):
        normalize.normalize_observations({"observations": {"station": [{"name": ["x"]}]}}, "en")


def test_empty_measurements_are_empty_strings():
    body = (
        '<observations><station id="1" valid="1">'
        "<T>2,1</T><SND></SND><err></err>"
        "</station></observations>"
    )
    record = normalize.normalize_observations(parse_xml(body), "is")[0]

    assert record == {"T": "2.1", "SND": "", "err": "", "id": "1", "valid": "1"}
