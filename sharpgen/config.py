"""sharpgen configuration.

Typed layout settings for the formatter. Pydantic v2 validates them at
construction time, so an out-of-range indent size or an unknown brace style
fails before any source is formatted.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class BraceStyle(str, Enum):
    """Where the formatter places an opening brace."""
    END_OF_LINE = "end_of_line"
    NEXT_LINE = "next_line"


class FormatterConfig(BaseModel):
    """Layout knobs for ``SourceFormatter``.

    The defaults produce four-space indentation with the opening brace at the
    end of the declaration line.
    """

    indent_size: int = Field(default=4, ge=1, le=16, description="Spaces per nesting level")
    use_tabs: bool = Field(default=False, description="Indent with one tab per level instead")
    brace_style: BraceStyle = Field(default=BraceStyle.END_OF_LINE)

    @property
    def indent_unit(self) -> str:
        """The text prepended once per nesting level."""
        if self.use_tabs:
            return "\t"
        return " " * self.indent_size
