# Utility modules for Batched
from .sanitizer import (
    sanitize_text, sanitize_recipe_name, sanitize_ingredient_name,
    sanitize_note, sanitize_instructions
)
