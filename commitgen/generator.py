"""Message Generator - ask the LLM for a commit message until one validates."""

from commitgen.llm import LLMClient, LLMError, LLMResponse
from commitgen.messages import clean_commit_message, validate_commit_message
from commitgen.output import Spinner, print_error, print_warning, print_detail
from commitgen.prompts import PromptBuilder, SYSTEM_PROMPT, LENGTH_REMINDER

# Service errors and rejected messages share this budget
MAX_ATTEMPTS = 3


class MessageGenerator:
    """Drives the generate -> clean -> validate loop against one client."""

    def __init__(self, client: LLMClient, builder: PromptBuilder | None = None, verbose: bool = False):
        self.client = client
        self.builder = builder or PromptBuilder()
        self.verbose = verbose

    def _request(self, prompt: str) -> LLMResponse:
        with Spinner():
            response = self.client.generate(SYSTEM_PROMPT, [prompt, LENGTH_REMINDER])
        if not response.content or not response.content.strip():
            raise LLMError("No content received from the service")
        return response

    def generate(self, diff: str, attempts: int = MAX_ATTEMPTS) -> str | None:
        """Return a valid commit message, or None once attempts run out."""
        prompt = self.builder.build(diff)
        if self.verbose:
            print_detail(f"Prompt: ~{len(prompt)//4} tokens ({len(prompt)} chars) via {self.client.name}")

        while attempts > 0:
            attempts -= 1
            try:
                response = self._request(prompt)
            except Exception as e:
                # Any failure of the call costs one attempt, not the whole run
                print_error(f"Error generating commit message: {e}")
                continue

            message = clean_commit_message(response.content)
            if self.verbose:
                print_detail(f"Response: {response.tokens_used} tokens, {attempts} attempts left")

            if not validate_commit_message(message):
                print_warning(f"Invalid message ({len(message)} chars): Regenerating...")
                continue

            return message

        print_warning("Failed to generate a valid commit message after multiple attempts.")
        return None
