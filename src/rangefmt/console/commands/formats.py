from __future__ import annotations

from rangefmt.console.commands.command import Command
from rangefmt.formatting.formatter import RangeFormat


class FormatsCommand(Command):
    name = "formats"
    description = "Lists the format characters understood by the render command."

    def handle(self) -> int:
        for range_format in RangeFormat:
            self.line(
                f"<c1>{range_format.value}</> <comment>{range_format.name.lower()}</>"
                f"  {range_format.description}"
            )

        return 0
