"""Custom exceptions for color parsing.

Parse failures on the raising path carry the rejected text so callers can
report it; the ``try_parse`` variants never raise and return None instead.
"""


class ColorFormatError(ValueError):
    """Raised when a string is not in any accepted color syntax.

    Attributes:
        text: The input that failed to parse.
        model: Human-readable name of the color model being parsed.
    """

    def __init__(self, text: str, model: str = "color") -> None:
        """Initialize format error with the offending input.

        Args:
            text: The rejected input string.
            model: Color model name used in the message ("color",
                "HSL color" or "HSV color").
        """
        self.text = text
        self.model = model
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return f"Invalid {self.model} string: '{self.text}'."
