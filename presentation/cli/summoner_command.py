from __future__ import annotations

import argparse
from typing import Optional

from application.services import StatsService
from config import settings
from domain.enums import Region
from infrastructure.api.errors import HttpStatusError
from .base import Command, non_negative_int


class SummonerCommand(Command):
    name = "summoner"
    help = "look up a summoner by name"

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        super().add_arguments(parser)
        parser.add_argument("summoner_name", help="summoner name, spaces allowed")
        parser.add_argument("--matches", "-m", type=non_negative_int, default=None, help="number of recent match ids")

    async def run(self, args: argparse.Namespace) -> int:
        args.summoner_name = args.summoner_name.strip()
        if not args.summoner_name:
            print("Please enter a summoner name", file=self.err)
            return 2
        return await super().run(args)

    async def execute(self, service: StatsService, args: argparse.Namespace) -> Optional[int]:
        region = Region.from_code(args.region)
        count = args.matches if args.matches is not None else settings.MATCH_COUNT
        try:
            profile = await service.summoner_profile(args.region, args.summoner_name, count)
        except HttpStatusError as e:
            if e.status_code == 404:
                print(f'Could not find summoner "{args.summoner_name}" in {region.friendly}', file=self.err)
                return 1
            raise

        s = profile.summoner
        self.echo(f"{s.summoner_name}  (level {s.summoner_level}, {region.friendly})")
        if not profile.entries:
            self.echo("  Unranked")
        for entry in profile.entries:
            self.echo(
                f"  {entry.queue_type or '-'}: {entry.display_tier} {entry.league_points} LP"
                f"  {entry.wins}W/{entry.losses}L ({entry.winrate:.1f}%)"
            )
        for mastery in profile.masteries[:3]:
            champion = await service.catalog.get_by_id(mastery.get("championId", 0))
            champ_name = champion["name"] if champion else "Unknown"
            self.echo(f"  Mastery {mastery.get('championLevel', 0)} {champ_name}: {mastery.get('championPoints', 0)} pts")
        if profile.match_ids:
            self.echo("  Recent matches: " + ", ".join(profile.match_ids))
