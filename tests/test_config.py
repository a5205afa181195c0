"""Tests for config loading, tuning presets, and env var overrides."""

from pathlib import Path

import pytest

from jsleak.config.defaults import DEFAULT_TOML
from jsleak.config.loader import ConfigError, find_config_file, load_config
from jsleak.config.schema import JsleakConfig, ScanConfig
from jsleak.config.tuning import LENIENT, PRESETS, STRICT, resolve_tuning


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("JSLEAK_TUNING", "JSLEAK_MIN_CONFIDENCE", "JSLEAK_FORMAT", "JSLEAK_DISABLE_PATTERNS"):
        monkeypatch.delenv(name, raising=False)


class TestTuningPresets:
    def test_presets(self):
        assert set(PRESETS) == {"strict", "lenient"}
        assert STRICT.context_radius == 100
        assert STRICT.min_confidence == 60
        assert LENIENT.context_radius == 50
        assert LENIENT.min_confidence == 0
        assert LENIENT.skip_minified is False
        assert STRICT.key_block_bonus == 25
        assert LENIENT.key_block_bonus == 0

    def test_resolve_with_overrides(self):
        tuning = resolve_tuning("strict", {"token_min_entropy": 4.2, "bogus": 1, "name": "x"})
        assert tuning.token_min_entropy == 4.2
        assert tuning.name == "strict"
        assert STRICT.token_min_entropy == 4.0

    def test_resolve_without_overrides_returns_preset(self):
        assert resolve_tuning("lenient") is LENIENT

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            resolve_tuning("paranoid")

    def test_config_resolution(self):
        cfg = JsleakConfig(
            scan=ScanConfig(tuning="lenient", min_confidence=40, context_radius=80),
            tuning={"skip_minified": True},
        )
        tuning = cfg.resolved_tuning()
        assert tuning.name == "lenient"
        assert tuning.min_confidence == 40
        assert tuning.context_radius == 80
        assert tuning.skip_minified is True


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.scan.tuning == "strict"
        assert cfg.scan.concurrency == 1
        assert cfg.feed.extensions == [".js"]
        assert cfg.output.format == "terminal"
        assert cfg.resolved_tuning() is STRICT

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text(
            'version = "1.0"\n'
            "[scan]\n"
            'tuning = "lenient"\n'
            "concurrency = 4\n"
            "[tuning]\n"
            "token_min_entropy = 4.2\n"
            "[allowlist]\n"
            'patterns = ["^AIzaSyDUMMY"]\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.scan.tuning == "lenient"
        assert cfg.scan.concurrency == 4
        assert cfg.allowlist.patterns == ["^AIzaSyDUMMY"]
        assert cfg.resolved_tuning().token_min_entropy == 4.2

    def test_default_template_loads(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.scan.tuning == "strict"
        assert cfg.output.show_summary is True

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text("[scan]\nfuture_option = true\n")
        assert load_config(tmp_path).scan.tuning == "strict"

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[output]\nformat = "json"\n')
        assert find_config_file(tmp_path, str(custom)) == custom
        assert load_config(tmp_path, config_override=str(custom)).output.format == "json"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_unknown_tuning_raises(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text('[scan]\ntuning = "paranoid"\n')
        with pytest.raises(ConfigError, match="paranoid"):
            load_config(tmp_path)

    def test_bad_concurrency_raises(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text("[scan]\nconcurrency = 0\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_section_of_wrong_type_raises(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text('scan = "strict"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_malformed_allowlist_regex_raises(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text('[allowlist]\npatterns = ["("]\n')
        with pytest.raises(ConfigError, match="allowlist"):
            load_config(tmp_path)

    def test_allowlist_must_be_list(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text('[allowlist]\npatterns = "^AIza"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestTuningOverrideTypes:
    @pytest.mark.parametrize(
        "body",
        [
            'min_confidence = "high"',
            "min_confidence = 60.5",
            "skip_minified = 1",
            "context_radius = true",
            'binary_entropy = "4.5"',
        ],
    )
    def test_wrong_type_raises(self, tmp_path: Path, body):
        (tmp_path / ".jsleak.toml").write_text(f"[tuning]\n{body}\n")
        with pytest.raises(ConfigError, match="tuning"):
            load_config(tmp_path)

    def test_scan_section_floor_checked(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text('[scan]\nmin_confidence = "high"\n')
        with pytest.raises(ConfigError, match="min_confidence"):
            load_config(tmp_path)

    def test_int_accepted_for_float_field(self, tmp_path: Path):
        (tmp_path / ".jsleak.toml").write_text("[tuning]\nbinary_entropy = 5\nskip_minified = false\n")
        tuning = load_config(tmp_path).resolved_tuning()
        assert tuning.binary_entropy == 5
        assert tuning.skip_minified is False


class TestEnvVarOverrides:
    def test_tuning_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JSLEAK_TUNING", "lenient")
        assert load_config(tmp_path).scan.tuning == "lenient"

    def test_min_confidence_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JSLEAK_MIN_CONFIDENCE", "75")
        cfg = load_config(tmp_path)
        assert cfg.resolved_tuning().min_confidence == 75

    def test_min_confidence_clamped(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JSLEAK_MIN_CONFIDENCE", "250")
        assert load_config(tmp_path).scan.min_confidence == 100

    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JSLEAK_FORMAT", "json")
        assert load_config(tmp_path).output.format == "json"

    def test_disable_patterns_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JSLEAK_DISABLE_PATTERNS", "us_cn_zipcode, docs_file_extension")
        cfg = load_config(tmp_path)
        assert cfg.patterns.disable == ["us_cn_zipcode", "docs_file_extension"]

    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JSLEAK_TUNING", "paranoid")
        monkeypatch.setenv("JSLEAK_MIN_CONFIDENCE", "high")
        monkeypatch.setenv("JSLEAK_FORMAT", "sarif")
        cfg = load_config(tmp_path)
        assert cfg.scan.tuning == "strict"
        assert cfg.scan.min_confidence is None
        assert cfg.output.format == "terminal"
