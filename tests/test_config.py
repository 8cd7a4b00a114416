# tests/test_config.py
"""Tests for Settings and config loading."""

import os

import pytest

from quizsmith.config import (
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    load_env_file,
    validate_config,
)
from quizsmith.exceptions import ConfigError
from quizsmith.generation import QuizPipeline
from quizsmith.settings import Settings
from quizsmith.taxonomy import TaxonomyCategory


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.llm_model == "anthropic/claude-sonnet-4-5-20250929"
        assert settings.embedding_model == "gemini/text-embedding-004"
        assert settings.oversampling_factor == 1.5
        assert settings.oversampling_pad == 2
        assert settings.similarity_threshold == 0.95
        assert settings.refine_temperature == 0.2
        assert settings.refine is True
        assert settings.balance_rounding is False

    def test_category_temperatures_reach_generator(self, make_llm, embedding_client):
        settings = Settings(category_temperatures={"applying": 0.9})
        assert settings.category_temperatures == {TaxonomyCategory.APPLYING: 0.9}

        llm = make_llm(lambda messages, temperature: "{}")
        pipeline = QuizPipeline.from_clients(llm, embedding_client, settings)
        generator = pipeline.composer.question_generator
        assert generator.temperature_for(TaxonomyCategory.APPLYING) == 0.9
        assert generator.temperature_for(TaxonomyCategory.REMEMBERING) == 0.3

    @pytest.mark.parametrize(
        "field,value",
        [("similarity_threshold", 0.0), ("similarity_threshold", 1.5), ("oversampling_factor", 0.5)],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValueError):
            Settings(**{field: value})

    def test_with_overrides(self):
        settings = Settings()
        updated = settings.with_overrides(refine=False)
        assert updated.refine is False
        assert settings.refine is True


class TestConfigFiles:
    def test_find_config_in_parent(self, tmp_path):
        (tmp_path / "quizsmith.yaml").write_text("llm_model: openai/gpt-4.1\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == tmp_path / "quizsmith.yaml"

    def test_load_config(self, tmp_path):
        path = tmp_path / "quizsmith.yaml"
        path.write_text("llm_model: openai/gpt-4.1\nsettings:\n  refine: false\n")
        assert load_config(path) == {"llm_model": "openai/gpt-4.1", "settings": {"refine": False}}

    def test_empty_config(self, tmp_path):
        path = tmp_path / "quizsmith.yaml"
        path.write_text("")
        assert load_config(path) == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "quizsmith.yaml"
        path.write_text("settings: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "quizsmith.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_validate_config_warnings(self):
        warnings = validate_config({"llm_model": "x", "colour": "blue", "settings": {"speed": 1}})
        assert len(warnings) == 2
        assert "colour" in warnings[0]
        assert "speed" in warnings[1]

    def test_validate_config_clean(self):
        assert validate_config({"settings": {"refine": True, "llm_timeout": 30}}) == []


class TestEnv:
    def test_load_env_file_does_not_override(self, tmp_path, monkeypatch):
        env = tmp_path / ".env"
        env.write_text("# keys\nQUIZSMITH_TEST_A='from-file'\nQUIZSMITH_TEST_B=\"kept\"\n")
        monkeypatch.setenv("QUIZSMITH_TEST_A", "from-env")
        monkeypatch.delenv("QUIZSMITH_TEST_B", raising=False)

        load_env_file(env)

        assert os.environ["QUIZSMITH_TEST_A"] == "from-env"
        assert os.environ["QUIZSMITH_TEST_B"] == "kept"
        monkeypatch.delenv("QUIZSMITH_TEST_B")

    def test_missing_env_file(self, tmp_path):
        load_env_file(tmp_path / "missing.env")

    def test_settings_from_env(self):
        values = get_settings_from_env(
            {"QUIZSMITH_REFINE": "false", "QUIZSMITH_LLM_TIMEOUT": "", "OTHER": "1"}
        )
        assert values == {"refine": "false", "llm_timeout": None}


class TestBuildSettings:
    def test_yaml_values(self):
        config = {"llm_model": "openai/gpt-4.1", "settings": {"similarity_threshold": 0.9}}
        assert get_settings_from_yaml(config) == {
            "llm_model": "openai/gpt-4.1",
            "similarity_threshold": 0.9,
        }
        settings = build_settings(config, env_settings={})
        assert settings.llm_model == "openai/gpt-4.1"
        assert settings.similarity_threshold == 0.9

    def test_env_overrides_yaml(self):
        config = {"settings": {"refine": True, "oversampling_pad": 4}}
        settings = build_settings(config, env_settings={"refine": "false", "llm_timeout": None})
        assert settings.refine is False
        assert settings.oversampling_pad == 4
        assert settings.llm_timeout is None

    def test_reads_process_env(self, monkeypatch):
        monkeypatch.setenv("QUIZSMITH_OVERSAMPLING_PAD", "5")
        assert build_settings({}).oversampling_pad == 5

    def test_invalid_value_raises_config_error(self):
        with pytest.raises(ConfigError) as exc_info:
            build_settings({"settings": {"similarity_threshold": 2}}, env_settings={})
        assert exc_info.value.suggestion
