"""Presentation CLI exports."""
from .base import Command
from .summoner_command import SummonerCommand
from .live_command import LiveCommand
from .leaderboard_command import LeaderboardCommand
from .champion_command import ChampionCommand
from .parser import COMMANDS, build_parser, run

__all__ = [
    "Command",
    "SummonerCommand",
    "LiveCommand",
    "LeaderboardCommand",
    "ChampionCommand",
    "COMMANDS",
    "build_parser",
    "run",
]
