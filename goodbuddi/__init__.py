"""GoodBuddi: plan a day in a scratchpad, then work through it."""

from .editor import handle_editor_keydown, StructuredEditor
from .scratchpad import parse_scratchpad

__version__ = "1.0.0"
