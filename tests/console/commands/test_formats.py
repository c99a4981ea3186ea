from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from rangefmt.formatting.formatter import RangeFormat


if TYPE_CHECKING:
    from collections.abc import Callable

    from cleo.testers.command_tester import CommandTester


@pytest.fixture
def tester(command_tester_factory: Callable[[str], CommandTester]) -> CommandTester:
    return command_tester_factory("formats")


def test_formats(tester: CommandTester) -> None:
    tester.execute()

    lines = tester.io.fetch_output().splitlines()

    assert len(lines) == len(RangeFormat)
    assert lines[0] == f"P pretty  {RangeFormat.PRETTY.description}"
    assert [line[0] for line in lines] == [f.value for f in RangeFormat]
