"""Application configuration via environment variables and YAML.

All service settings are prefixed with ESSAY_ and can be overridden via
environment variables (e.g. ESSAY_MODEL_ID=gpt-4o).

Scoring policy is loaded from a YAML file with environment override support.
Priority: environment variables > YAML file > code defaults.
"""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel
from pydantic_settings import BaseSettings

load_dotenv()

ENV_PREFIX = "ESSAY_POLICY_"


class BandConfig(BaseModel):
    min_score: float = 0.0
    max_score: float = 9.0
    epsilon: float = 0.01


class TiersConfig(BaseModel):
    high: float = 7.5
    good: float = 6.5
    fair: float = 5.5


class HighlightsConfig(BaseModel):
    max_highlights: int = 8


class ScoringConfig(BaseModel):
    band: BandConfig = BandConfig()
    tiers: TiersConfig = TiersConfig()
    highlights: HighlightsConfig = HighlightsConfig()


_DEFAULT_FEEDBACK_SYSTEM_PROMPT = """You are an expert IELTS Writing examiner. Analyze the essay and provide detailed feedback in the following format:

Task Response: [score 0-9]
Coherence & Cohesion: [score 0-9]
Lexical Resource: [score 0-9]
Grammar: [score 0-9]

Overall Score: [average score]

Feedback: [2-3 sentences of general feedback]

Provide scores as decimals (e.g., 6.5, 7.0). Be specific and constructive in your feedback."""

_DEFAULT_FEEDBACK_USER_TEMPLATE = """Please evaluate this IELTS {task_type} essay:{prompt_context}

Essay:
{essay}

Provide your evaluation in the exact format specified."""

_DEFAULT_HIGHLIGHTS_SYSTEM_PROMPT = (
    "You are an IELTS writing tutor. Return only valid JSON in the exact format "
    "requested, no additional text."
)

_DEFAULT_HIGHLIGHTS_INSTRUCTIONS = """Analyze this IELTS essay and identify specific phrases or sentences that need improvement or are particularly good. Return a JSON object with a "highlights" array containing objects with this format:
{
  "highlights": [
    {
      "text": "exact phrase from essay",
      "type": "needs-improvement" or "good",
      "reason": "brief explanation"
    }
  ]
}

Only include 3-5 highlights. Focus on vocabulary, grammar, and style issues."""


class PromptsConfig(BaseModel):
    feedback_system_prompt: str = _DEFAULT_FEEDBACK_SYSTEM_PROMPT
    feedback_user_template: str = _DEFAULT_FEEDBACK_USER_TEMPLATE
    highlights_system_prompt: str = _DEFAULT_HIGHLIGHTS_SYSTEM_PROMPT
    highlights_instructions: str = _DEFAULT_HIGHLIGHTS_INSTRUCTIONS
    prompt_context_format: str = "\n\nTask Prompt:\n{prompt}\n"


def _apply_env_overrides(data: dict) -> dict:
    """Override flat YAML values with ESSAY_POLICY_<SECTION>_<KEY> env vars."""
    for section_name, section in data.items():
        if not isinstance(section, dict):
            continue
        for key, existing in section.items():
            env_val = os.environ.get(f"{ENV_PREFIX}{section_name.upper()}_{key.upper()}")
            if env_val is None:
                continue
            # bool before int: bool is an int subclass
            if isinstance(existing, bool):
                section[key] = env_val.strip().lower() in ("1", "true", "yes", "on")
            elif isinstance(existing, int):
                section[key] = int(env_val)
            elif isinstance(existing, float):
                section[key] = float(env_val)
            else:
                section[key] = env_val
    return data


def _read_yaml(config_path: str) -> dict:
    path = Path(config_path)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def load_prompts_config(config_path: str = "config/prompts.yaml") -> PromptsConfig:
    """Load prompt templates from YAML, fall back to code defaults."""
    return PromptsConfig.model_validate(_read_yaml(config_path))


def load_scoring_config(config_path: str = "config/scoring.yaml") -> ScoringConfig:
    """Load scoring policy from YAML, apply env overrides, fall back to defaults."""
    data = _apply_env_overrides(_read_yaml(config_path))
    return ScoringConfig.model_validate(data)


class Settings(BaseSettings):
    """Essay review configuration. All fields map to ESSAY_<FIELD_NAME> env vars."""

    model_config = {"env_prefix": "ESSAY_", "protected_namespaces": ()}

    openai_base_url: str = "https://api.openai.com/v1"
    model_id: str = "gpt-4o-mini"
    model_api_key: str = ""
    model_timeout: float = 60.0
    feedback_temperature: float = 0.7
    feedback_max_tokens: int = 1000
    highlights_temperature: float = 0.5
    highlights_max_tokens: int = 800
    auth_token: str = "demo-token"
    max_essay_length: int = 20000
    scoring_config_path: str = "config/scoring.yaml"
    prompts_config_path: str = "config/prompts.yaml"
    cors_origins: str = "*"
    log_level: str = "INFO"


settings = Settings()
scoring_config = load_scoring_config(settings.scoring_config_path)
prompts_config = load_prompts_config(settings.prompts_config_path)
