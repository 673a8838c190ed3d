"""Prompt Builder - Construct LLM prompts for commit message generation."""

from commitgen import COMMIT_TYPES, MAX_MESSAGE_LENGTH

# Only the head of the diff is sent as context
DIFF_CONTEXT_CHARS = 500

SYSTEM_PROMPT = (
    "Generate precise, concise Git commit messages following conventional commit standards. "
    "Focus on brevity and clarity. "
    f"Ensure the message is {MAX_MESSAGE_LENGTH} characters or less."
)

# Sent as a second user message; models often ignore the limit otherwise
LENGTH_REMINDER = (
    f"Reminder: The commit message MUST be {MAX_MESSAGE_LENGTH} characters or less. "
    "Be extremely concise."
)


class PromptBuilder:
    """Renders the user prompt for a staged diff."""

    def build(self, diff: str) -> str:
        sections = [
            self._build_request_section(),
            self._build_type_guidelines(),
            self._build_diff_section(diff),
        ]
        return "\n\n".join(filter(None, sections))

    def _build_request_section(self) -> str:
        types_list = ", ".join(COMMIT_TYPES)
        return f"""Generate a concise conventional commit message that:
- Uses a standard prefix from: {types_list}
- Optional scope in parentheses is allowed
- Describes the core change precisely
- Must be {MAX_MESSAGE_LENGTH} characters or less"""

    def _build_type_guidelines(self) -> str:
        lines = [f"{t}: {desc}" for t, desc in COMMIT_TYPES.items()]
        return "Commit Type Guidelines:\n" + "\n".join(lines)

    def _build_diff_section(self, diff: str) -> str:
        return f"Staged Changes Context:\n{diff[:DIFF_CONTEXT_CHARS]}"
