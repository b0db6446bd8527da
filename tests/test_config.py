import os
import tempfile

from src.essay_review.config import (
    PromptsConfig,
    ScoringConfig,
    _apply_env_overrides,
    load_prompts_config,
    load_scoring_config,
)


def _write_yaml(content: str) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write(content)
    return f.name


class TestLoadScoringConfig:
    def test_loads_from_yaml(self):
        path = _write_yaml("tiers:\n  high: 8.0\n  good: 7.0\n  fair: 6.0\n")
        config = load_scoring_config(path)
        os.unlink(path)

        assert config.tiers.high == 8.0
        assert config.tiers.good == 7.0
        assert config.tiers.fair == 6.0

    def test_missing_file_uses_defaults(self):
        config = load_scoring_config("/nonexistent/path/scoring.yaml")
        assert config.band.epsilon == 0.01
        assert config.band.max_score == 9.0
        assert config.tiers.high == 7.5
        assert config.highlights.max_highlights == 8

    def test_partial_yaml_merges_with_defaults(self):
        path = _write_yaml("band:\n  max_score: 10.0\n")
        config = load_scoring_config(path)
        os.unlink(path)

        assert config.band.max_score == 10.0
        assert config.band.epsilon == 0.01
        assert config.tiers.good == 6.5

    def test_empty_yaml_uses_defaults(self):
        path = _write_yaml("")
        config = load_scoring_config(path)
        os.unlink(path)

        assert config == ScoringConfig()

    def test_env_override_applied_to_yaml_value(self, monkeypatch):
        monkeypatch.setenv("ESSAY_POLICY_HIGHLIGHTS_MAX_HIGHLIGHTS", "3")
        path = _write_yaml("highlights:\n  max_highlights: 5\n")
        config = load_scoring_config(path)
        os.unlink(path)

        assert config.highlights.max_highlights == 3


class TestApplyEnvOverrides:
    def test_overrides_int_value(self, monkeypatch):
        monkeypatch.setenv("ESSAY_POLICY_HIGHLIGHTS_MAX_HIGHLIGHTS", "20")
        result = _apply_env_overrides({"highlights": {"max_highlights": 8}})
        assert result["highlights"]["max_highlights"] == 20

    def test_overrides_float_value(self, monkeypatch):
        monkeypatch.setenv("ESSAY_POLICY_BAND_EPSILON", "0.05")
        result = _apply_env_overrides({"band": {"epsilon": 0.01}})
        assert result["band"]["epsilon"] == 0.05

    def test_overrides_bool_value(self, monkeypatch):
        monkeypatch.setenv("ESSAY_POLICY_FLAGS_STRICT", "true")
        result = _apply_env_overrides({"flags": {"strict": False}})
        assert result["flags"]["strict"] is True

    def test_overrides_string_value(self, monkeypatch):
        monkeypatch.setenv("ESSAY_POLICY_CUSTOM_NAME", "test")
        result = _apply_env_overrides({"custom": {"name": "default"}})
        assert result["custom"]["name"] == "test"

    def test_ignores_non_dict_sections(self):
        result = _apply_env_overrides({"version": "1.0", "band": {"epsilon": 0.01}})
        assert result["version"] == "1.0"

    def test_no_env_preserves_original(self):
        result = _apply_env_overrides({"tiers": {"high": 7.5}})
        assert result["tiers"]["high"] == 7.5


class TestLoadPromptsConfig:
    def test_loads_from_yaml(self):
        path = _write_yaml('feedback_system_prompt: "Custom examiner"\n')
        config = load_prompts_config(path)
        os.unlink(path)

        assert config.feedback_system_prompt == "Custom examiner"
        assert "highlights" in config.highlights_instructions

    def test_missing_file_uses_defaults(self):
        config = load_prompts_config("/nonexistent/prompts.yaml")
        assert "IELTS Writing examiner" in config.feedback_system_prompt
        assert "{essay}" in config.feedback_user_template
        assert "{prompt}" in config.prompt_context_format

    def test_default_prompt_lists_parser_labels(self):
        from src.essay_review.engine.feedback_parser import NARRATIVE_LABEL, OVERALL_LABEL, SCORE_LABELS

        prompt = PromptsConfig().feedback_system_prompt
        for label in [*SCORE_LABELS.values(), OVERALL_LABEL, NARRATIVE_LABEL]:
            assert label in prompt
