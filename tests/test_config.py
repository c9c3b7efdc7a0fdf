# tests/test_config.py

"""
Tests for application settings.
"""

from app.config import Settings


class TestSettings:
    """Test required keys and defaults."""

    def test_anon_key_not_required(self, monkeypatch, tmp_path):
        """Only the service role key is needed for Supabase."""
        monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("SUPABASE_ANON_KEY=left-over-from-old-deploy\n")

        settings = Settings(_env_file=env_file)

        assert settings.supabase_service_role_key
        assert not hasattr(settings, "supabase_anon_key")

    def test_verification_defaults(self, monkeypatch):
        monkeypatch.delenv("VERIFICATION_TOLERANCE", raising=False)
        monkeypatch.delenv("CATALOG_MATCH_THRESHOLD", raising=False)

        settings = Settings(_env_file=None)

        assert settings.verification_tolerance == 1000
        assert settings.catalog_match_threshold == 0.82
        assert "LDA-25-91-AD" in settings.agaseke_plates
