from __future__ import annotations

from cleo.exceptions import CleoError


class RangeFmtConsoleError(CleoError):
    pass
