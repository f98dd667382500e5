"""
Reminders Export Service

Sends a consolidated shopping list to the macOS Reminders app through
AppleScript, one reminder per item.
"""

import logging
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_LIST_NAME = 'Batched Shopping List'
DEFAULT_CHUNK_SIZE = 50


class RemindersError(Exception):
    """Raised when osascript fails or is unavailable."""
    pass


@dataclass
class ExportResult:
    ok: bool
    exported: int = 0
    error: str = None

    def to_dict(self):
        return {'ok': self.ok, 'exported': self.exported, 'error': self.error}


def pluralize_unit(quantity, unit):
    """'cup' -> 'cups' unless the quantity is exactly 1 or the unit already ends in s."""
    if quantity == 1:
        return unit
    if unit.endswith('s'):
        return unit
    return unit + 's'


def format_quantity(quantity):
    """2.0 -> '2', 1.5 -> '1.5'"""
    return str(int(quantity)) if quantity == int(quantity) else str(quantity)


def format_reminder(item):
    """
    Title and notes for one shopping list item.

    Title: "Onion (Red) (2 pieces)"; notes: "For: Chili, Tacos".
    """
    display_name = item.ingredient.display_name
    if item.note:
        display_name = f"{display_name} ({item.note})"
    unit = pluralize_unit(item.total_quantity, item.unit)
    title = f"{display_name} ({format_quantity(item.total_quantity)} {unit})"
    notes = f"For: {', '.join(item.from_recipes)}"
    return title, notes


def _escape(text):
    return text.replace('\\', '\\\\').replace('"', '\\"')


def run_applescript(script):
    """Run an AppleScript snippet and return its stdout."""
    try:
        result = subprocess.run(
            ['osascript', '-e', script],
            capture_output=True, text=True, check=True,
        )
    except FileNotFoundError:
        raise RemindersError('osascript is not available on this system')
    except subprocess.CalledProcessError as e:
        raise RemindersError(e.stderr.strip() or f'osascript exited with code {e.returncode}')
    return result.stdout.strip()


def ensure_list(list_name):
    script = f'''
tell application "Reminders"
    if not (exists list "{_escape(list_name)}") then
        make new list with properties {{name:"{_escape(list_name)}"}}
    end if
end tell
'''
    run_applescript(script)


def add_reminders_batch(list_name, reminders):
    """Create several reminders with a single osascript call."""
    if not reminders:
        return
    statements = '\n        '.join(
        f'make new reminder with properties {{name:"{_escape(title)}", body:"{_escape(notes)}"}}'
        for title, notes in reminders
    )
    script = f'''
tell application "Reminders"
    tell list "{_escape(list_name)}"
        {statements}
    end tell
end tell
'''
    run_applescript(script)


def export_to_reminders(items, list_name=DEFAULT_LIST_NAME, chunk_size=DEFAULT_CHUNK_SIZE):
    """
    Export items the user doesn't already have.

    Reminders are created in chunks of `chunk_size` so one oversized
    script can't fail the whole list. Stops at the first failed chunk and
    reports how many reminders were created before it.
    """
    reminders = [format_reminder(item) for item in items if not item.already_have]

    exported = 0
    try:
        ensure_list(list_name)
        for start in range(0, len(reminders), chunk_size):
            chunk = reminders[start:start + chunk_size]
            add_reminders_batch(list_name, chunk)
            exported += len(chunk)
    except RemindersError as e:
        logger.warning("Reminders export failed after %d items: %s", exported, e)
        return ExportResult(ok=False, exported=exported, error=str(e))

    logger.info("Exported %d items to Reminders list '%s'", exported, list_name)
    return ExportResult(ok=True, exported=exported)
