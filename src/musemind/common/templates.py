"""Prompt templating helpers."""
from __future__ import annotations
from enum import Enum


class Theme(str, Enum):
    LOVELINES = "lovelines"
    MOODVERSE = "moodverse"
    SOULSCRIPT = "soulscript"

    @classmethod
    def parse(cls, value: object) -> "Theme":
        """Resolve a raw theme value; anything unknown falls back to moodverse."""
        if isinstance(value, str):
            for theme in cls:
                if theme.value == value:
                    return theme
        return cls.MOODVERSE


LOVELINES_TEMPLATE = """You are a romantic poet. Write a beautiful, heartfelt love poem (exactly 5 lines) about: {{input}}

Requirements:
- Make it sweet, emotional, and expressive
- Focus on feelings of love, affection, and tenderness
- Use romantic and poetic language
- Keep it to exactly 5 lines
- Don't include a title
- Make each line flow naturally

Write the poem now:"""

MOODVERSE_TEMPLATE = """You are an emotional poet. Write a deeply emotional poem (exactly 5 lines) that captures these feelings: {{input}}

Requirements:
- Reflect the mood authentically and powerfully
- Whether joyful, melancholic, anxious, or peaceful - capture it fully
- Use vivid, evocative language
- Keep it to exactly 5 lines
- Don't include a title
- Make each line meaningful

Write the poem now:"""

SOULSCRIPT_TEMPLATE = """You are an inspirational poet. Write an uplifting, reflective affirmation poem (exactly 5 lines) about: {{input}}

Requirements:
- Make it inspiring, motivational, and soul-nourishing
- Focus on inner strength, personal growth, and positivity
- Use empowering and affirming language
- Keep it to exactly 5 lines
- Don't include a title
- Make each line resonate

Write the poem now:"""


def load_template(theme: Theme) -> str:
    """
    Return the prompt template for a theme.

    Args:
        theme: Resolved theme.
    """
    if theme is Theme.LOVELINES:
        return LOVELINES_TEMPLATE
    if theme is Theme.SOULSCRIPT:
        return SOULSCRIPT_TEMPLATE
    # moodverse, and the fallback for anything Theme.parse could not match
    return MOODVERSE_TEMPLATE


def render_prompt(template: str, user_input: str) -> str:
    """
    Render user input into the template.

    Args:
        template: Template content containing {{input}}.
        user_input: Input string, embedded verbatim.

    Returns:
        Rendered prompt.
    """
    return template.replace("{{input}}", user_input)


def build_prompt(user_input: str, theme: object) -> str:
    """Build the upstream prompt for a raw theme value and the user's text."""
    return render_prompt(load_template(Theme.parse(theme)), user_input)
