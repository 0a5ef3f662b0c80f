import pytest

from app.config import Config, RelayConfig, DEFAULT_AUTOMATION_WEBHOOK_URL


def test_loads_supabase_settings(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
    monkeypatch.delenv("AUTOMATION_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("SUPABASE_BUCKET", raising=False)

    config = Config.from_env()

    assert config.supabase.url == "https://abc.supabase.co"
    assert config.supabase.bucket == "resumes"
    assert config.supabase.folder == "public"
    assert config.supabase.table == "users"
    assert config.webhook.url == DEFAULT_AUTOMATION_WEBHOOK_URL


@pytest.mark.parametrize("missing", ["SUPABASE_URL", "SUPABASE_ANON_KEY"])
def test_missing_supabase_settings_fail_fast(monkeypatch, missing):
    monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
    monkeypatch.delenv(missing)

    with pytest.raises(ValueError, match="Missing Supabase environment variables"):
        Config.from_env()


def test_relay_config_does_not_need_supabase(monkeypatch, tmp_path):
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("UPLOAD_DIR", str(tmp_path))

    relay_config = RelayConfig.from_env()

    assert relay_config.port == 3000
    assert relay_config.upload_dir == tmp_path
