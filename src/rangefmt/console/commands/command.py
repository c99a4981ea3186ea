from __future__ import annotations

from typing import TYPE_CHECKING
from typing import ClassVar

from cleo.commands.command import Command as BaseCommand


if TYPE_CHECKING:
    from rangefmt.config import Config
    from rangefmt.console.application import Application


class Command(BaseCommand):
    loggers: ClassVar[list[str]] = []

    @property
    def config(self) -> Config:
        return self.get_application().config

    def get_application(self) -> Application:
        from rangefmt.console.application import Application

        application = self.application
        assert isinstance(application, Application)
        return application
