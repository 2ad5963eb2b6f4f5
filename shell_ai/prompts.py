"""
Prompt template handling for Shell AI.

The template lives in settings/prompt.txt and carries the placeholders
{SHELL}, {OS} and {PROMPT}. Substitution is literal: neither the tokens
nor the user's text are treated as regular expressions.
"""

import re
from typing import Dict

SHELL_TOKEN = "{SHELL}"
OS_TOKEN = "{OS}"
PROMPT_TOKEN = "{PROMPT}"


def replace_text(text: str, replacements: Dict[str, str]) -> str:
    """Replace every occurrence of each key with its value, in one pass.

    Inserted values are never rescanned, so a prompt that itself contains
    "{OS}" or backslashes comes through unchanged.
    """
    if not replacements:
        return text
    pattern = "|".join(re.escape(token) for token in replacements)
    return re.sub(pattern, lambda m: replacements[m.group(0)], text)


def build_prompt(template: str, shell: str, os_info: str, prompt: str) -> str:
    """Fill the template with context variables and the user's request."""
    return replace_text(template, {
        SHELL_TOKEN: shell,
        OS_TOKEN: os_info,
        PROMPT_TOKEN: prompt,
    })
