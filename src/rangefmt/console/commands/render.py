from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

from cleo.formatters.formatter import Formatter
from cleo.helpers import argument
from cleo.helpers import option

from rangefmt.console.commands.command import Command
from rangefmt.console.exceptions import RangeFmtConsoleError
from rangefmt.exceptions import ParseVersionError


if TYPE_CHECKING:
    from cleo.io.inputs.argument import Argument
    from cleo.io.inputs.option import Option

    from rangefmt.version.version_range import VersionRange


class RenderCommand(Command):
    name = "render"
    description = "Renders a version range built from the given bounds."

    arguments: ClassVar[list[Argument]] = [
        argument(
            "format",
            "The format string. Each of the characters P, L, U, S, N, D, T and A is"
            " replaced by the matching rendering, other characters are kept as is.",
            optional=True,
        ),
    ]
    options: ClassVar[list[Option]] = [
        option("min", None, "The lower bound version.", flag=False),
        option("max", None, "The upper bound version.", flag=False),
        option("exclusive-min", None, "Exclude the lower bound from the range."),
        option("inclusive-max", None, "Include the upper bound in the range."),
        option(
            "float",
            None,
            "A floating lower bound, e.g. <comment>1.*</> or <comment>1.0.0-beta*</>.",
            flag=False,
        ),
    ]

    loggers: ClassVar[list[str]] = ["rangefmt.formatting.formatter"]

    help = """\
The render command prints a version range in one of several notations.

  <comment>rangefmt render N --min 1.0 --max 2.0</>   [1.0.0, 2.0.0)
  <comment>rangefmt render P --min 1.0 --max 2.0</>   (>= 1.0.0 && < 2.0.0)
  <comment>rangefmt render S --float 1.*</>           1.*

Run <comment>rangefmt formats</> for the full list of format characters.
"""

    def handle(self) -> int:
        fmt = self.argument("format") or self.config.get("default-format")
        if not fmt:
            raise RangeFmtConsoleError(
                "No format was given and the default-format setting is empty."
            )

        try:
            version_range = self.build_range()
        except ParseVersionError as e:
            self.line_error(f"<error>{e}</error>")
            return 1

        text = version_range.format(fmt)
        if self.config.get("render.escape-output"):
            text = Formatter.escape(text)

        self.line(text)

        return 0

    def build_range(self) -> VersionRange:
        from rangefmt.version.float_range import FloatRange
        from rangefmt.version.version import Version
        from rangefmt.version.version_range import VersionRange

        min_version = self.option("min")
        max_version = self.option("max")
        float_range = self.option("float")

        return VersionRange(
            min_version=Version.parse(min_version) if min_version else None,
            max_version=Version.parse(max_version) if max_version else None,
            include_min=not self.option("exclusive-min"),
            include_max=bool(self.option("inclusive-max")),
            float_range=FloatRange.parse(float_range) if float_range else None,
        )
