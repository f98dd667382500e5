"""
Input Sanitization Module

Cleans free text from API clients before it is stored: control
characters removed, whitespace collapsed, length bounded.
"""

import re

from constants import MAX_LENGTHS

CONTROL_CHARS_RE = re.compile(r'[\x00-\x08\x0b-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Strip and bound a single-line text value.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Cleaned string, '' for None
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = CONTROL_CHARS_RE.sub('', text)

    # Collapse runs of whitespace (including newlines) to one space
    text = re.sub(r'\s+', ' ', text).strip()

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_recipe_name(name):
    """Recipe name; empty string when nothing usable is left."""
    return sanitize_text(name, max_length=MAX_LENGTHS['recipe_name'])


def sanitize_ingredient_name(name):
    return sanitize_text(name, max_length=MAX_LENGTHS['ingredient_name'])


def sanitize_note(note):
    """Ingredient note; None when blank so it doesn't split shopping lines."""
    note = sanitize_text(note, max_length=MAX_LENGTHS['note'])
    return note or None


def sanitize_instructions(instructions, max_length=None):
    """
    Sanitize multi-line text (legacy instructions, step content).

    Preserves newlines but strips control characters.
    """
    if not instructions:
        return ''

    if max_length is None:
        max_length = MAX_LENGTHS['instructions']

    if not isinstance(instructions, str):
        instructions = str(instructions)

    instructions = CONTROL_CHARS_RE.sub('', instructions).strip()

    if len(instructions) > max_length:
        instructions = instructions[:max_length]

    return instructions
