from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, TextIO

from application.services import StatsService
from config import settings
from core.logging.logger import StructuredLogger, get_logger
from domain.enums import Region
from infrastructure.api import RiotAPIClient, RiotAPIError

ClientFactory = Callable[[], RiotAPIClient]


def default_client_factory() -> RiotAPIClient:
    return RiotAPIClient(settings.RIOT_API_KEY)


def non_negative_int(value: str) -> int:
    """``argparse`` type for counts; rejects negatives with a usage error."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {number}")
    return number


class Command:
    """One ``lol-stats`` sub-command.

    Subclasses set ``name``/``help``, declare their arguments and implement
    ``execute``. ``run`` owns the client lifetime and turns API errors into
    a message on stderr and exit code 1.
    """

    name: str = ""
    help: str = ""
    requires_api_key: bool = True

    def __init__(
        self,
        client_factory: Optional[ClientFactory] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.client_factory = client_factory or default_client_factory
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.logger: StructuredLogger = get_logger(__name__, service="cli")

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--region", "-r",
            default=settings.DEFAULT_REGION,
            help=f"region code ({', '.join(r.value for r in Region.all_regions())}); unknown codes fall back to na",
        )

    def echo(self, line: str = "") -> None:
        print(line, file=self.out)

    async def execute(self, service: StatsService, args: argparse.Namespace) -> Optional[int]:
        """Print the command output; a non-None return is the exit code."""
        raise NotImplementedError

    async def run(self, args: argparse.Namespace) -> int:
        if self.requires_api_key:
            try:
                settings.validate()
            except ValueError as e:
                print(f"error: {e}", file=self.err)
                return 2
        try:
            async with self.client_factory() as api:
                code = await self.execute(StatsService(api), args)
        except RiotAPIError as e:
            self.logger.error(lambda: f"{self.name}-failed {e}")
            print(f"error: {e}", file=self.err)
            return 1
        return code or 0
