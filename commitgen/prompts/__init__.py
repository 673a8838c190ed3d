"""Prompt Construction Package"""

from commitgen.prompts.builder import PromptBuilder, SYSTEM_PROMPT, LENGTH_REMINDER, DIFF_CONTEXT_CHARS

__all__ = [
    "PromptBuilder",
    "SYSTEM_PROMPT",
    "LENGTH_REMINDER",
    "DIFF_CONTEXT_CHARS",
]
