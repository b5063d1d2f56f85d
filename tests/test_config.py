"""Tests for config.py: profiles and file overrides."""

from pathlib import Path

import pytest

from org_analytics.config import load_analytics_config
from org_analytics.exceptions import ConfigurationError
from org_analytics.utils.types import OutputFormat


class TestProfiles:
    def test_default_profile(self, tmp_path):
        config = load_analytics_config(root=tmp_path)
        assert config.profile == "default"
        assert config.policy.minimum_percentage == 20
        assert config.policy.maximum_percentage == 50
        assert config.policy.reporting_lines_threshold == 4
        assert config.input.path == Path("SampleData.csv")
        assert config.input.has_header
        assert config.output.directory is None
        assert config.output.fmt == OutputFormat.CSV

    def test_strict_profile(self, tmp_path):
        policy = load_analytics_config("strict", root=tmp_path).policy
        assert (policy.minimum_percentage, policy.maximum_percentage) == (25, 40)
        assert policy.reporting_lines_threshold == 3

    def test_unknown_profile(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Unknown policy profile"):
            load_analytics_config("generous", root=tmp_path)


class TestOverrides:
    def test_yaml_overrides_profile(self, tmp_path):
        (tmp_path / "org_analytics.yaml").write_text(
            "profile: lenient\n"
            "reporting_lines_threshold: 2\n"
            "file: data/staff.csv\n"
            "has_header: false\n"
            "format: json\n"
            "export_dir: out\n"
        )
        config = load_analytics_config(root=tmp_path)
        assert config.profile == "lenient"
        assert config.policy.minimum_percentage == 10
        assert config.policy.reporting_lines_threshold == 2
        assert config.input.path == Path("data/staff.csv")
        assert not config.input.has_header
        assert config.output.fmt == OutputFormat.JSON
        assert config.output.directory == Path("out")

    def test_explicit_profile_beats_file_profile(self, tmp_path):
        (tmp_path / "org_analytics.yaml").write_text("profile: lenient\n")
        assert load_analytics_config("strict", root=tmp_path).profile == "strict"

    def test_pyproject_tool_table(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text(
            "[tool.org_analytics]\nminimum_percentage = 15\nmaximum_percentage = 45\n"
        )
        policy = load_analytics_config(root=tmp_path).policy
        assert (policy.minimum_percentage, policy.maximum_percentage) == (15, 45)

    def test_yaml_preferred_over_pyproject(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[tool.org_analytics]\nminimum_percentage = 15\n")
        (tmp_path / "org_analytics.yaml").write_text("minimum_percentage: 30\n")
        assert load_analytics_config(root=tmp_path).policy.minimum_percentage == 30

    def test_non_integer_policy_value(self, tmp_path):
        (tmp_path / "org_analytics.yaml").write_text("maximum_percentage: '50'\n")
        with pytest.raises(ConfigurationError):
            load_analytics_config(root=tmp_path)

    def test_bad_format(self, tmp_path):
        (tmp_path / "org_analytics.yaml").write_text("format: xml\n")
        with pytest.raises(ConfigurationError, match="xml"):
            load_analytics_config(root=tmp_path)

    def test_unknown_key_is_ignored(self, tmp_path, caplog):
        (tmp_path / "org_analytics.yaml").write_text("colour: blue\n")
        config = load_analytics_config(root=tmp_path)
        assert config.policy.minimum_percentage == 20
        assert "colour" in caplog.text

    @pytest.mark.parametrize("content", ["- minimum_percentage\n- 30\n", "strict\n", "42\n"])
    def test_yaml_must_be_a_mapping(self, tmp_path, content):
        (tmp_path / "org_analytics.yaml").write_text(content)
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_analytics_config(root=tmp_path)
