from __future__ import annotations

from pathlib import Path

from wxkit.config import Settings, load_settings


def test_defaults_without_config_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    for key in ("WX_OA_APPID", "WX_REQUEST_TIMEOUT", "WX_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)

    settings = load_settings(str(tmp_path / "missing.yaml"))

    assert settings == Settings()
    assert settings.request.timeout == 30.0
    assert settings.logging.format == "json"


def test_yaml_with_env_expansion(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MY_APPSECRET", "s3cret")
    monkeypatch.delenv("WX_OA_APPID", raising=False)
    config = tmp_path / "config.yaml"
    config.write_text(
        "oa:\n"
        "  appid: wx123\n"
        "  appsecret: ${MY_APPSECRET}\n"
        "  token: ${MISSING_TOKEN:-fallback}\n"
        "corp:\n"
        "  corpid: ww456\n"
        "  secrets:\n"
        "    hr: abc\n",
        encoding="utf-8",
    )

    settings = load_settings(str(config))

    assert settings.oa.appid == "wx123"
    assert settings.oa.appsecret == "s3cret"
    assert settings.oa.token == "fallback"
    assert settings.corp.corpid == "ww456"
    assert settings.corp.secrets == {"hr": "abc"}


def test_env_overrides_yaml(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "config.yaml"
    config.write_text("oa:\n  appid: from_yaml\n", encoding="utf-8")
    monkeypatch.setenv("WX_OA_APPID", "from_env")
    monkeypatch.setenv("WX_REQUEST_TIMEOUT", "12.5")
    monkeypatch.setenv("WX_LOG_LEVEL", "DEBUG")

    settings = load_settings(str(config))

    assert settings.oa.appid == "from_env"
    assert settings.request.timeout == 12.5
    assert settings.logging.level == "DEBUG"
