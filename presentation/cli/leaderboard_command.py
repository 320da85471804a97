from __future__ import annotations

import argparse

from application.services import StatsService
from config import settings
from domain.enums import QueueType, Region
from .base import Command, non_negative_int


class LeaderboardCommand(Command):
    name = "leaderboard"
    help = "top challenger players by league points"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        super().add_arguments(parser)
        parser.add_argument(
            "--queue", "-q",
            choices=[q.value for q in QueueType.ranked_queues()],
            default=QueueType.RANKED_SOLO_5x5.value,
        )
        parser.add_argument("--top", "-t", type=non_negative_int, default=settings.LEADERBOARD_SIZE)

    async def execute(self, service: StatsService, args: argparse.Namespace) -> None:
        rows = await service.leaderboard(args.region, args.queue, top=args.top)
        if not rows:
            self.echo(f"No players available in {Region.from_code(args.region).friendly}")
            return
        for row in rows:
            e = row.entry
            self.echo(f"#{row.rank:<3} {e.summoner_name or e.puuid or '-':<24} {e.league_points:>5} LP  {e.winrate:.1f}%")
