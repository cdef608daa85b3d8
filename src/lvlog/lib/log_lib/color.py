"""
ANSI colorizing with a known escape-code overhead.

Every colorized string is wrapped in exactly one foreground code and one
reset code, so the number of invisible bytes is fixed and reported back
in ColorizedText.color_code_length. Width calculations subtract it to get
the visible length.

colorama is used for the escape codes only. colorama.init() is never
called here, so sys.stdout and sys.stderr are left unwrapped.
"""

from dataclasses import dataclass
from enum import Enum

from colorama import Fore, Style


class Color(Enum):
    """Foreground colors used by the level and hex renderers."""
    RED = Fore.RED
    GREEN = Fore.GREEN
    YELLOW = Fore.YELLOW
    BLUE = Fore.BLUE
    MAGENTA = Fore.MAGENTA
    CYAN = Fore.CYAN


RESET = Style.RESET_ALL


@dataclass(frozen=True)
class ColorizedText:
    """Rendered text plus the length of its embedded escape codes.

    Attributes:
        text: The string as written to the terminal
        color_code_length: Characters in ``text`` that are escape codes
    """
    text: str
    color_code_length: int = 0

    @property
    def visible_length(self) -> int:
        return len(self.text) - self.color_code_length

    def __str__(self):
        return self.text


def colorize(text, color: Color) -> ColorizedText:
    """Wrap text in a foreground color and a reset."""
    code = color.value
    return ColorizedText(
        text=f"{code}{text}{RESET}",
        color_code_length=len(code) + len(RESET),
    )
