from __future__ import annotations

import argparse

from application.services import StatsService
from infrastructure.api import endpoints
from .base import Command


class ChampionCommand(Command):
    name = "champion"
    help = "look up a champion by numeric id (Data Dragon, no API key needed)"
    requires_api_key = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("champion_id", help="numeric champion id, e.g. 266")

    async def execute(self, service: StatsService, args: argparse.Namespace) -> None:
        champion = await service.champion(args.champion_id)
        self.echo(f"{champion.name}, {champion.title}" if champion.title else champion.name)
        if champion.tags:
            self.echo(f"  Tags: {', '.join(champion.tags)}")
        self.echo(f"  Image: {endpoints.champion_image_url(service.catalog.version, champion.id)}")
