from __future__ import annotations

import argparse

from application.services import StatsService
from domain.enums import Region
from .base import Command, non_negative_int


class LiveCommand(Command):
    name = "live"
    help = "list featured live games"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        super().add_arguments(parser)
        parser.add_argument("--limit", "-n", type=non_negative_int, default=None, help="show at most N games")

    async def execute(self, service: StatsService, args: argparse.Namespace) -> None:
        games = await service.live_games(args.region, limit=args.limit)
        if not games:
            self.echo(f"No live games available in {Region.from_code(args.region).friendly}")
            return
        for game in games:
            self.echo(f"[{game.game_mode}] game {game.game_id}  {game.duration}")
            blue = ", ".join(f"{p.summoner_name} ({p.champion_name})" for p in game.blue_team)
            red = ", ".join(f"{p.summoner_name} ({p.champion_name})" for p in game.red_team)
            self.echo(f"  Blue: {blue}")
            self.echo(f"  Red:  {red}")
