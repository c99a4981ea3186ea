from __future__ import annotations

import contextlib
import os

from typing import TYPE_CHECKING
from typing import Any

import pytest

from cleo.testers.command_tester import CommandTester

from rangefmt.config import Config
from rangefmt.console.application import Application
from rangefmt.version.float_range import FloatRange
from rangefmt.version.version import Version
from rangefmt.version.version_range import VersionRange


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Iterator

    from pytest_mock import MockerFixture


@contextlib.contextmanager
def isolated_environment(
    environ: dict[str, Any] | None = None, clear: bool = False
) -> Iterator[None]:
    original_environ = dict(os.environ)

    if clear:
        os.environ.clear()

    if environ:
        os.environ.update(environ)

    yield

    os.environ.clear()
    os.environ.update(original_environ)


@pytest.fixture
def environ() -> Iterator[None]:
    with isolated_environment():
        yield


@pytest.fixture(autouse=True)
def isolate_environ() -> Iterator[None]:
    """Ensure the environment is isolated from user configuration."""
    with isolated_environment():
        for var in list(os.environ):
            if var.startswith("RANGEFMT_"):
                del os.environ[var]

        yield


@pytest.fixture
def config(mocker: MockerFixture) -> Config:
    c = Config()
    mocker.patch("rangefmt.config.Config.create", return_value=c)

    return c


@pytest.fixture
def make_range() -> Callable[..., VersionRange]:
    def _make(
        min_version: str | None = None,
        max_version: str | None = None,
        include_min: bool = True,
        include_max: bool = False,
        float_range: str | None = None,
    ) -> VersionRange:
        return VersionRange(
            min_version=Version.parse(min_version) if min_version else None,
            max_version=Version.parse(max_version) if max_version else None,
            include_min=include_min,
            include_max=include_max,
            float_range=FloatRange.parse(float_range) if float_range else None,
        )

    return _make


@pytest.fixture
def app(config: Config) -> Application:
    app = Application()
    app.auto_exits(False)

    return app


@pytest.fixture
def command_tester_factory(app: Application) -> Callable[[str], CommandTester]:
    def _tester(command: str) -> CommandTester:
        command_obj = app.find(command)
        tester = CommandTester(command_obj)

        # Setting the formatter from the application
        app_io = app.create_io()
        formatter = app_io.output.formatter
        tester.io.output.set_formatter(formatter)
        tester.io.error_output.set_formatter(formatter)

        return tester

    return _tester
