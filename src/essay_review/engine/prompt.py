"""Prompt construction for the examiner and highlight calls.

Both prompts are templated from ``prompts_config`` so they can be tuned from
YAML. The examiner prompt fixes the four labeled score lines and the
trailing ``Feedback:`` block that the feedback parser expects.
"""

from ..config import prompts_config


def _prompt_context(prompt: str | None) -> str:
    if not prompt:
        return ""
    return prompts_config.prompt_context_format.format(prompt=prompt)


def get_feedback_system_prompt() -> str:
    return prompts_config.feedback_system_prompt


def get_highlights_system_prompt() -> str:
    return prompts_config.highlights_system_prompt


def build_feedback_prompt(essay: str, task_type: str, prompt: str | None = None) -> str:
    return prompts_config.feedback_user_template.format(
        task_type=task_type or "Task 2",
        prompt_context=_prompt_context(prompt),
        essay=essay,
    )


def build_highlights_prompt(essay: str, prompt: str | None = None) -> str:
    parts = []
    if prompt:
        parts.append(f"Task Prompt:\n{prompt}")
    parts.append(f"Essay:\n{essay}")
    parts.append(prompts_config.highlights_instructions)
    return "\n\n".join(parts)
