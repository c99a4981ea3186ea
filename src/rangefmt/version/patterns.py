from __future__ import annotations

import re


_LABELS = r"[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*"

COMPLETE_VERSION = re.compile(
    r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.(\d+))?"
    rf"(?:-({_LABELS}))?"
    rf"(?:\+({_LABELS}))?$"
)

# 1.*, 1.2.*, 1.2.3.* or a bare *
FLOAT_NUMERIC = re.compile(r"^(?:(\d+(?:\.\d+){0,2})\.)?\*$")

# beta*, beta.*, * (an empty prefix)
FLOAT_RELEASE = re.compile(r"^([0-9A-Za-z.-]*)\*$")
