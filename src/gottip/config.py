"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (buffer limits, percent range,
   presets) scattered throughout the model and the widgets.
2. Consistency: The model, the widgets and the tests all read the same
   limits, so changing a limit here changes it everywhere.

Exports:
    MAX_BUFFER_LENGTH (int): Maximum number of characters in the subtotal field.
    MAX_FRACTION_DIGITS (int): Maximum number of digits after the decimal point.
    TIP_PERCENT_MIN, TIP_PERCENT_MAX, TIP_PERCENT_STEP (int): Slider range.
    DEFAULT_TIP_PERCENT (int): Tip percentage selected on launch.
    TIP_PRESETS (tuple): Percentages offered as one-tap buttons.
"""
# Application identity
ORG_ID: str = "gottip"
APP_ID: str = "got-tip"
VISIBLE_APP_NAME: str = "Got Tip?"

# Subtotal buffer
ALLOWED_CHARACTERS: frozenset[str] = frozenset("0123456789.")
DECIMAL_POINT: str = "."
MAX_BUFFER_LENGTH: int = 16
MAX_FRACTION_DIGITS: int = 2

# Tip percentage
TIP_PERCENT_MIN: int = 0
TIP_PERCENT_MAX: int = 30
TIP_PERCENT_STEP: int = 1
DEFAULT_TIP_PERCENT: int = 15
TIP_PRESETS: tuple[int, ...] = (0, 10, 15, 20)

# Display
CURRENCY_SYMBOL: str = "$"
SUBTOTAL_PLACEHOLDER: str = "Sub-total Amount"
PROMPT_MESSAGE: str = "First, please enter a sub-total amount."

# Delay before the subtotal field grabs focus after launch
FOCUS_DELAY_MS: int = 100

# Qt platforms without a real screen; deferred focus is skipped on these
HEADLESS_PLATFORMS: frozenset[str] = frozenset({"offscreen", "minimal"})
