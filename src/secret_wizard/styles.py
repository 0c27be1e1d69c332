"""Styling for questionary prompts.

All wizard questions share this style so that the menu, text inputs and
confirmations look alike.
"""

from questionary import Style

PROMPT_STYLE = Style(
    [
        ("qmark", "fg:#5fafff bold"),  # Blue question mark
        ("question", "bold"),
        ("answer", "fg:#87d787 bold"),  # Green submitted answer
        ("pointer", "fg:#5fafff bold"),
        ("highlighted", "fg:#1c1c1c bg:#5fafff bold"),  # Dark text on blue background
        ("selected", "fg:#87d787"),
        ("instruction", "fg:#6c6c6c italic"),  # Gray italic instructions
        ("text", ""),
    ]
)

# Icon prefixes for prompts
POINTER = "❯ "
QMARK = "? "
