"""
Unit tests for core modules: message cleaning/validation, PromptBuilder, Config.

Run with:
    pytest tests/test_core.py -v
"""

import json

import pytest

from commitgen import COMMIT_TYPES, COMMIT_TYPE_NAMES, MAX_MESSAGE_LENGTH
from commitgen.config import Config, ConfigManager, apply_env_overrides
from commitgen.llm import GenerationParams
from commitgen.messages import clean_commit_message, validate_commit_message
from commitgen.prompts import PromptBuilder, SYSTEM_PROMPT, LENGTH_REMINDER, DIFF_CONTEXT_CHARS


# ---------------------------------------------------------------------------
# Commit type taxonomy
# ---------------------------------------------------------------------------

class TestCommitTypes:

    def test_label_set_and_order(self):
        assert COMMIT_TYPE_NAMES == [
            "feat", "fix", "docs", "style", "refactor", "test",
            "chore", "build", "ci", "perf", "revert",
        ]

    def test_every_label_has_description(self):
        assert all(COMMIT_TYPES[name] for name in COMMIT_TYPE_NAMES)


# ---------------------------------------------------------------------------
# validate_commit_message
# ---------------------------------------------------------------------------

class TestValidateCommitMessage:

    @pytest.mark.parametrize("message", [
        "feat: add login page",
        "fix(api): handle timeout",
        "docs(readme-2): document hook install",
        "revert: undo broken migration",
        "chore:bump version",
        "ci(github): cache pip downloads",
    ])
    def test_accepts_conventional_messages(self, message):
        assert validate_commit_message(message) is True

    @pytest.mark.parametrize("commit_type", COMMIT_TYPE_NAMES)
    def test_accepts_every_type(self, commit_type):
        assert validate_commit_message(f"{commit_type}: do the thing") is True

    @pytest.mark.parametrize("message", [
        "Update stuff",
        "feature: add login",
        "Feat: add login",
        "feat(API): uppercase scope",
        "feat(auth scope): space in scope",
        "feat(): empty scope",
        "feat:",
        "feat: ",
        "feat!: breaking change marker",
        "Here is your message: feat: add login",
        "feat: add login\nsecond line",
        "feat: add login\r\nsecond line",
        "feat: add login\rsecond line",
        "",
    ])
    def test_rejects_non_conventional(self, message):
        assert validate_commit_message(message) is False

    def test_accepts_exactly_max_length(self):
        message = "feat: " + "a" * (MAX_MESSAGE_LENGTH - len("feat: "))
        assert len(message) == MAX_MESSAGE_LENGTH
        assert validate_commit_message(message) is True

    def test_rejects_over_max_length(self):
        message = "feat: " + "a" * (MAX_MESSAGE_LENGTH - len("feat: ") + 1)
        assert validate_commit_message(message) is False

    def test_length_measured_after_stripping_wrappers(self):
        body = "feat: " + "a" * (MAX_MESSAGE_LENGTH - len("feat: "))
        assert validate_commit_message(f"  ``{body}``  ") is True

    def test_strips_backticks_before_matching(self):
        assert validate_commit_message("`fix(cli): quote args`") is True


# ---------------------------------------------------------------------------
# clean_commit_message
# ---------------------------------------------------------------------------

class TestCleanCommitMessage:

    def test_backticks_and_trailing_newline(self):
        raw = "`feat(auth): add token refresh`\n"
        cleaned = clean_commit_message(raw)
        assert cleaned == "feat(auth): add token refresh"
        assert validate_commit_message(cleaned) is True

    def test_quoted_backticked_message(self):
        raw = '"`feat(auth): add token refresh`\n"'
        assert clean_commit_message(raw) == "feat(auth): add token refresh"

    def test_strips_triple_backticks(self):
        assert clean_commit_message("```fix(api): handle timeout```") == "fix(api): handle timeout"

    @pytest.mark.parametrize("raw", ['"chore: bump version"', "'chore: bump version'"])
    def test_strips_quotes(self, raw):
        assert clean_commit_message(raw) == "chore: bump version"

    def test_joins_lines_with_spaces(self):
        assert clean_commit_message("fix(db): close\nconnections") == "fix(db): close connections"

    def test_strips_trailing_asterisk(self):
        assert clean_commit_message("perf: cache lookups*") == "perf: cache lookups"

    def test_plain_message_unchanged(self):
        assert clean_commit_message("docs: fix typo") == "docs: fix typo"

    def test_empty_string(self):
        assert clean_commit_message("   ") == ""

    @pytest.mark.parametrize("raw", [
        "`feat(auth): add token refresh`\n",
        '"\'`style: reformat`\'"',
        "refactor: split module **",
        "  ``'test: cover edge cases'``  ",
        "fix: a\nb\nc*",
        '"""',
        "`*`",
        "Update stuff",
    ])
    def test_idempotent(self, raw):
        once = clean_commit_message(raw)
        assert clean_commit_message(once) == once


# ---------------------------------------------------------------------------
# PromptBuilder
# ---------------------------------------------------------------------------

class TestPromptBuilder:

    @pytest.fixture
    def builder(self):
        return PromptBuilder()

    def test_lists_every_type_with_description(self, builder):
        result = builder.build("diff --git a/x b/x")
        for name, description in COMMIT_TYPES.items():
            assert f"{name}: {description}" in result
        assert ", ".join(COMMIT_TYPE_NAMES) in result

    def test_types_in_taxonomy_order(self, builder):
        result = builder.build("")
        positions = [result.index(f"\n{name}: ") for name in COMMIT_TYPE_NAMES]
        assert positions == sorted(positions)

    def test_restates_length_limit(self, builder):
        assert "72 characters or less" in builder.build("+x")

    def test_truncates_diff_context(self, builder):
        diff = "a" * DIFF_CONTEXT_CHARS + "TAIL"
        result = builder.build(diff)
        assert "a" * DIFF_CONTEXT_CHARS in result
        assert "TAIL" not in result

    def test_short_diff_included_whole(self, builder):
        diff = "diff --git a/src/app.py b/src/app.py\n+added line"
        assert diff in builder.build(diff)

    def test_deterministic(self, builder):
        assert builder.build("+same") == builder.build("+same")

    def test_system_prompt_and_reminder_mention_limit(self):
        assert "72 characters or less" in SYSTEM_PROMPT
        assert "72 characters or less" in LENGTH_REMINDER


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.provider == "github"
        assert config.model is None
        assert config.generation_params() == GenerationParams()

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"provider": "claude", "unknown_key": "value"})
        assert config.provider == "claude"
        assert not hasattr(config, "unknown_key")

    def test_validate_invalid_provider(self):
        config = Config(provider="gpt4")
        warnings = config.validate()
        assert len(warnings) == 1
        assert config.provider == "github"

    def test_validate_leaves_sampling_params_alone(self):
        config = Config(temperature=7, top_p=-1)
        assert config.validate() == []
        assert config.temperature == 7

    def test_from_dict_triggers_validation(self, capsys):
        Config.from_dict({"provider": "invalid"})
        err = capsys.readouterr().err
        assert "Config warning" in err

    def test_generation_params(self):
        params = Config(temperature=0.3, max_tokens=60, top_p=0.9).generation_params()
        assert params.as_kwargs() == {"temperature": 0.3, "max_tokens": 60, "top_p": 0.9}


class TestEnvOverrides:

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("CM_PROVIDER", "CM_MODEL", "OPENAI_BASE_MODEL",
                     "OPENAI_TEMPERATURE", "OPENAI_MAX_TOKENS", "OPENAI_TOP_P"):
            monkeypatch.delenv(name, raising=False)

    def test_no_env_keeps_config(self):
        config = apply_env_overrides(Config(provider="claude", temperature=0.5))
        assert config.provider == "claude"
        assert config.temperature == 0.5

    def test_numeric_params_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENAI_TEMPERATURE", "0.7")
        monkeypatch.setenv("OPENAI_MAX_TOKENS", "100")
        monkeypatch.setenv("OPENAI_TOP_P", "1")
        config = apply_env_overrides(Config())
        assert config.temperature == 0.7
        assert config.max_tokens == 100
        assert config.top_p == 1.0

    def test_model_from_openai_base_model(self, monkeypatch):
        monkeypatch.setenv("OPENAI_BASE_MODEL", "gpt-4o")
        assert apply_env_overrides(Config()).model == "gpt-4o"

    def test_cm_model_wins_over_openai_base_model(self, monkeypatch):
        monkeypatch.setenv("OPENAI_BASE_MODEL", "gpt-4o")
        monkeypatch.setenv("CM_MODEL", "gpt-4o-mini")
        assert apply_env_overrides(Config()).model == "gpt-4o-mini"

    def test_provider_from_env(self, monkeypatch):
        monkeypatch.setenv("CM_PROVIDER", "claude")
        assert apply_env_overrides(Config()).provider == "claude"

    def test_invalid_provider_from_env_warns(self, monkeypatch, capsys):
        monkeypatch.setenv("CM_PROVIDER", "nope")
        config = apply_env_overrides(Config())
        assert config.provider == "github"
        assert "Config warning" in capsys.readouterr().err

    def test_unparseable_number_ignored(self, monkeypatch, capsys):
        monkeypatch.setenv("OPENAI_MAX_TOKENS", "lots")
        config = apply_env_overrides(Config(max_tokens=50))
        assert config.max_tokens == 50
        assert "OPENAI_MAX_TOKENS" in capsys.readouterr().err


class TestConfigManager:

    def test_load_returns_defaults_when_no_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        manager = ConfigManager()
        config = manager.load()
        assert config.provider == "github"
        assert manager.get_config_path() is None

    def test_load_reads_local_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config_file = tmp_path / ".commitgenrc"
        config_file.write_text(json.dumps({"provider": "claude", "temperature": 0.1}))

        manager = ConfigManager()
        config = manager.load()
        assert config.provider == "claude"
        assert config.temperature == 0.1
        assert manager.get_config_path().name == ".commitgenrc"

    def test_load_falls_back_to_home(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        home.mkdir()
        (home / ".commitgenrc").write_text(json.dumps({"model": "gpt-4o"}))
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: home)

        assert ConfigManager().load().model == "gpt-4o"

    def test_malformed_json_returns_defaults(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".commitgenrc").write_text("not valid json {{{")

        config = ConfigManager().load()
        assert config.provider == "github"
        assert "Could not load" in capsys.readouterr().err

    def test_load_is_cached(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        manager = ConfigManager()
        assert manager.load() is manager.load()
