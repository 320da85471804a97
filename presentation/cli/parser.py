from __future__ import annotations

import argparse
import asyncio
from typing import List, Optional, Sequence, Type

from .base import ClientFactory, Command
from .champion_command import ChampionCommand
from .leaderboard_command import LeaderboardCommand
from .live_command import LiveCommand
from .summoner_command import SummonerCommand

COMMANDS: List[Type[Command]] = [
    SummonerCommand,
    LiveCommand,
    LeaderboardCommand,
    ChampionCommand,
]


def build_parser(commands: Sequence[Command]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lol-stats",
        description="League of Legends stats from the Riot Games API.",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for cmd in commands:
        cmd_parser = sub.add_parser(cmd.name, help=cmd.help)
        cmd.add_arguments(cmd_parser)
        cmd_parser.set_defaults(handler=cmd)
    return parser


def run(argv: Optional[Sequence[str]] = None, client_factory: Optional[ClientFactory] = None) -> int:
    commands = [cls(client_factory=client_factory) for cls in COMMANDS]
    args = build_parser(commands).parse_args(list(argv) if argv is not None else None)
    return asyncio.run(args.handler.run(args))
