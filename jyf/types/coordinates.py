from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Position of a token in a source file; line and column start at 1.

    Host-synthesized syntax has no line/column and uses the NATIVE origin.
    """

    file: str
    line: Optional[int] = None
    column: Optional[int] = None

    @property
    def is_native(self) -> bool:
        return self.line is None

    def advance(self, text: str) -> Coordinates:
        """Coordinates of the character following `text` read from here."""
        newlines = text.count("\n")
        if newlines:
            return Coordinates(self.file, self.line + newlines, len(text) - text.rfind("\n"))
        return Coordinates(self.file, self.line, self.column + len(text))

    def describe(self) -> str:
        if self.line is None:
            return self.file
        return f"{self.file}:{self.line}:{self.column}"

    def __str__(self) -> str:
        return self.describe()


NATIVE = Coordinates("native")
