"""Unit tests for settings loading."""

import logging
from datetime import timedelta

from voteroute.config import GEO_COORDINATE_BOUND, VOTE_STEP, Settings, load_settings


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "config.yaml")

        assert settings == Settings()
        assert settings.vote_step == VOTE_STEP
        assert settings.lookback == timedelta(hours=1)
        assert settings.geo_coordinate_bound == GEO_COORDINATE_BOUND

    def test_yaml_overrides(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("lookback_minutes: 30\ngeo_coordinate_bound: 180\nlog_level: DEBUG\n")

        settings = load_settings(path)

        assert settings.lookback == timedelta(minutes=30)
        assert settings.geo_coordinate_bound == 180.0
        assert settings.log_level == "DEBUG"
        assert settings.vote_step == VOTE_STEP

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_settings(path) == Settings()

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("vote_step: 3\ntheme: dark\n")

        assert load_settings(path).vote_step == 3

    def test_invalid_yaml_warns_and_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.yaml"
        path.write_text("lookback_minutes: [unclosed\n")

        with caplog.at_level(logging.WARNING, logger="voteroute.config"):
            settings = load_settings(path)

        assert settings == Settings()
        assert "Ignoring config" in caplog.text

    def test_non_mapping_warns_and_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")

        with caplog.at_level(logging.WARNING, logger="voteroute.config"):
            settings = load_settings(path)

        assert settings == Settings()
        assert "mapping" in caplog.text

    def test_bad_value_warns_and_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.yaml"
        path.write_text("lookback_minutes: soon\n")

        with caplog.at_level(logging.WARNING, logger="voteroute.config"):
            assert load_settings(path) == Settings()
        assert "Ignoring config" in caplog.text
