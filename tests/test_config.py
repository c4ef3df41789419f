"""Tests for config loading and settings precedence."""

import pytest

from htmlpress.config import DEFAULT_PORT, Settings, build_settings, load_config, port_number


def test_load_config_missing_file(tmp_path):
    assert load_config(tmp_path / "site.toml") == {}


def test_load_config_formats(tmp_path):
    toml_path = tmp_path / "site.toml"
    toml_path.write_text('site_name = "Toml"\nport = 9000\n', encoding="utf-8")
    yaml_path = tmp_path / "site.yaml"
    yaml_path.write_text("site_name: Yaml\n", encoding="utf-8")
    json_path = tmp_path / "site.json"
    json_path.write_text('{"site_name": "Json"}', encoding="utf-8")

    assert load_config(toml_path) == {"site_name": "Toml", "port": 9000}
    assert load_config(yaml_path) == {"site_name": "Yaml"}
    assert load_config(json_path) == {"site_name": "Json"}


def test_load_config_empty_yaml(tmp_path):
    path = tmp_path / "site.yml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == {}


@pytest.mark.parametrize(
    "name, text",
    [
        ("site.json", "{not json"),
        ("site.json", "[1, 2]"),
        ("site.yaml", "- a\n- b\n"),
    ],
)
def test_load_config_rejects_bad_files(tmp_path, capsys, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    with pytest.raises(SystemExit):
        load_config(path)
    assert str(path) in capsys.readouterr().err


def test_build_settings_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    settings = build_settings({})
    assert settings == Settings()
    assert settings.port == DEFAULT_PORT
    assert settings.output == "dist"
    assert settings.base_url == "https://example.com"


def test_build_settings_precedence(monkeypatch):
    monkeypatch.setenv("PORT", "9100")
    assert build_settings({}).port == 9100
    assert build_settings({"port": "9200"}).port == 9200
    assert build_settings({"port": 9200}, port=9300).port == 9300

    settings = build_settings({"site_name": "From config", "posts": "content"}, site_name="From flag")
    assert settings.site_name == "From flag"
    assert settings.posts == "content"


def test_port_number():
    assert port_number(9000, 8080) == 9000
    assert port_number(" 9001 ", 8080) == 9001
    assert port_number("", 8080) == 8080
    assert port_number(None, 8080) == 8080
    assert port_number("eighty", 8080) == 8080
    assert port_number(True, 8080) == 8080
