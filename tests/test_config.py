"""Tests for configuration loading."""

import os

import pytest

from metrics_report.config import (
    DEFAULT_TEMPLATE_DIR,
    GroupConfig,
    ReportConfig,
    load_config,
    parse_group_option,
)
from metrics_report.errors import ConfigError


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        config = load_config(repo_root=str(tmp_path))
        assert config.report_html == ""
        assert config.template_dir == DEFAULT_TEMPLATE_DIR
        assert config.groups == []

    def test_discovers_file_in_root(self, tmp_path):
        (tmp_path / "metrics-report.yaml").write_text(
            "report_html: build/report\n"
            "groups:\n"
            "  - name: core\n"
            "    match: '^App\\\\Core'\n"
        )
        config = load_config(repo_root=str(tmp_path))
        assert config.report_html == os.path.join(str(tmp_path), "build", "report")
        assert config.groups == [GroupConfig(name="core", match="^App\\\\Core")]

    def test_hidden_file_is_second_choice(self, tmp_path):
        (tmp_path / ".metrics-report.yaml").write_text("report_html: out\n")
        config = load_config(repo_root=str(tmp_path))
        assert config.report_html == os.path.join(str(tmp_path), "out")

    def test_paths_resolve_against_config_dir(self, tmp_path):
        conf_dir = tmp_path / "conf"
        conf_dir.mkdir()
        path = conf_dir / "report.yaml"
        path.write_text("report_html: ../out\ntemplate_dir: tpl\n")
        config = load_config(config_path=str(path), repo_root="/elsewhere")
        assert config.report_html == os.path.join(str(tmp_path), "out")
        assert config.template_dir == os.path.join(str(conf_dir), "tpl")

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(config_path=str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "metrics-report.yaml"
        path.write_text("report_html: [unclosed\n")
        with pytest.raises(ConfigError):
            load_config(config_path=str(path))

    def test_top_level_must_be_mapping(self, tmp_path):
        path = tmp_path / "metrics-report.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(config_path=str(path))

    def test_groups_must_be_list(self, tmp_path):
        path = tmp_path / "metrics-report.yaml"
        path.write_text("groups: core\n")
        with pytest.raises(ConfigError) as exc:
            load_config(config_path=str(path))
        assert exc.value.key == "groups"

    @pytest.mark.parametrize("value", ["3", "[a, b]", "''"])
    def test_template_dir_must_be_path(self, tmp_path, value):
        path = tmp_path / "metrics-report.yaml"
        path.write_text(f"template_dir: {value}\n")
        with pytest.raises(ConfigError) as exc:
            load_config(config_path=str(path))
        assert exc.value.key == "template_dir"

    def test_duplicate_group_names(self, tmp_path):
        path = tmp_path / "metrics-report.yaml"
        path.write_text(
            "groups:\n"
            "  - {name: core, match: a}\n"
            "  - {name: core, match: b}\n"
        )
        with pytest.raises(ConfigError):
            load_config(config_path=str(path))

    def test_invalid_group_expression(self, tmp_path):
        path = tmp_path / "metrics-report.yaml"
        path.write_text("groups:\n  - {name: core, match: '(unclosed'}\n")
        with pytest.raises(ConfigError):
            load_config(config_path=str(path))


class TestGroupOption:
    def test_parse(self):
        assert parse_group_option("core=^App\\\\Core") == GroupConfig("core", "^App\\\\Core")

    def test_regex_may_contain_equals(self):
        assert parse_group_option("eq=a=b").match == "a=b"

    @pytest.mark.parametrize("value", ["core", "=^App"])
    def test_rejects_malformed(self, value):
        with pytest.raises(ConfigError):
            parse_group_option(value)


def test_build_groups_from_config():
    config = ReportConfig(groups=[GroupConfig("core", "^App")])
    assert [g.name for g in config.build_groups()] == ["core"]
