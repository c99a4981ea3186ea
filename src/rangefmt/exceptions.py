from __future__ import annotations


class RangeFmtError(Exception):
    pass


class InvalidArgumentError(RangeFmtError, ValueError):
    pass


class ParseVersionError(RangeFmtError, ValueError):
    pass
