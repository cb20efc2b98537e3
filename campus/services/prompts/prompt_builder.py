"""Prompt builder for the ask proxy - persona plus user query."""
from pathlib import Path
from typing import Dict, List

from campus.utils.logger import logger

DEFAULT_PERSONA = (
    "You are Sumi, a sarcastic but helpful campus guide for SRM girls. "
    "Keep answers short and friendly."
)


class PromptBuilder:
    """Builds the fixed two-message chat prompt."""

    def __init__(self):
        """Initialize prompt builder with prompts directory."""
        self._prompts_dir = Path(__file__).parent / "templates"
        self._system_prompt = self._load_prompt("system_prompt.promptly") or DEFAULT_PERSONA

    def _load_prompt(self, filename: str) -> str:
        """Load prompt text from .promptly file, extracting content after YAML frontmatter."""
        prompt_path = self._prompts_dir / filename
        try:
            content = prompt_path.read_text(encoding="utf-8")
            # Frontmatter is delimited by two "---" lines
            if content.startswith("---\n"):
                parts = content.split("---\n", 2)
                if len(parts) >= 3:
                    return parts[2].strip()
            return content.strip()
        except OSError as e:
            logger.warning(f"Failed to load prompt {filename}: {str(e)}")
            return ""

    def build_system_prompt(self) -> str:
        """Build system prompt."""
        return self._system_prompt

    def build_messages(self, query: str) -> List[Dict[str, str]]:
        """Build the system + user message list sent to the completion API."""
        return [
            {"role": "system", "content": self.build_system_prompt()},
            {"role": "user", "content": query},
        ]
