import pytest

from config import Settings
from presentation.cli import run
from .test_stats_service import CHALLENGER, FEATURED, SUMMONER


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(Settings, "RIOT_API_KEY", "RGAPI-test-key")


def test_leaderboard_command(api_key, router, client_factory, capsys):
    router.add("/lol/league/v4/challengerleagues/by-queue/RANKED_SOLO_5x5", body=CHALLENGER)
    code = run(["leaderboard", "--region", "euw", "--top", "2"], client_factory=client_factory)
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert len(out) == 2
    assert out[0].startswith("#1") and "Top" in out[0] and "1800 LP" in out[0] and "60.0%" in out[0]
    assert router.requests[-1].url.host == "euw1.api.riotgames.com"


def test_live_command(api_key, router, client_factory, capsys):
    router.add("/lol/spectator/v4/featured-games", body=FEATURED)
    code = run(["live", "-r", "na", "-n", "1"], client_factory=client_factory)
    out = capsys.readouterr().out
    assert code == 0
    assert "[CLASSIC] game 4242  10:05" in out
    assert "blue1 (Aatrox)" in out
    assert "red2 (Wukong)" in out


def test_summoner_command(api_key, router, client_factory, capsys):
    router.add("/lol/summoner/v4/summoners/by-name/Hide on bush", body=SUMMONER)
    router.add("/lol/league/v4/entries/by-summoner/sid-1", body=[])
    router.add("/lol/champion-mastery/v4/champion-masteries/by-summoner/sid-1",
               body=[{"championId": 266, "championLevel": 7, "championPoints": 1234}])
    router.add("/lol/match/v5/matches/by-puuid/puuid-1/ids", body=["KR_1"])
    code = run(["summoner", "Hide on bush", "--region", "kr"], client_factory=client_factory)
    out = capsys.readouterr().out
    assert code == 0
    assert "Hide on bush  (level 712, KR)" in out
    assert "Unranked" in out
    assert "Mastery 7 Aatrox: 1234 pts" in out
    assert "Recent matches: KR_1" in out


def test_summoner_not_found(api_key, client_factory, capsys):
    code = run(["summoner", "nobody", "--region", "euw"], client_factory=client_factory)
    captured = capsys.readouterr()
    assert code == 1
    assert 'Could not find summoner "nobody" in EUW' in captured.err


def test_api_error_reported_on_stderr(api_key, router, client_factory, capsys):
    router.add("/lol/spectator/v4/featured-games", status=403, body={})
    code = run(["live"], client_factory=client_factory)
    captured = capsys.readouterr()
    assert code == 1
    assert "HTTP 403" in captured.err


def test_missing_api_key(monkeypatch, client_factory, capsys):
    monkeypatch.setattr(Settings, "RIOT_API_KEY", "")
    code = run(["live"], client_factory=client_factory)
    assert code == 2
    assert "RIOT_API_KEY" in capsys.readouterr().err


def test_champion_command_needs_no_key(monkeypatch, client_factory, capsys):
    monkeypatch.setattr(Settings, "RIOT_API_KEY", "")
    code = run(["champion", "266"], client_factory=client_factory)
    out = capsys.readouterr().out
    assert code == 0
    assert "Aatrox, the Darkin Blade" in out
    assert "img/champion/Aatrox.png" in out


def test_champion_command_unknown_id(client_factory, capsys):
    code = run(["champion", "9999"], client_factory=client_factory)
    assert code == 1
    assert "9999" in capsys.readouterr().err


@pytest.mark.parametrize("name", ["", "   "])
def test_summoner_blank_name_rejected_before_any_request(api_key, router, client_factory, capsys, name):
    code = run(["summoner", name, "--region", "euw"], client_factory=client_factory)
    captured = capsys.readouterr()
    assert code == 2
    assert "Please enter a summoner name" in captured.err
    assert router.requests == []


def test_summoner_name_is_stripped(api_key, router, client_factory, capsys):
    router.add("/lol/summoner/v4/summoners/by-name/Hide on bush", body=SUMMONER)
    router.add("/lol/league/v4/entries/by-summoner/sid-1", body=[])
    router.add("/lol/champion-mastery/v4/champion-masteries/by-summoner/sid-1", body=[])
    router.add("/lol/match/v5/matches/by-puuid/puuid-1/ids", body=[])
    code = run(["summoner", "  Hide on bush ", "-r", "kr", "-m", "0"], client_factory=client_factory)
    assert code == 0
    assert str(router.requests[0].url).endswith("/by-name/Hide%20on%20bush")


@pytest.mark.parametrize("argv", [
    ["leaderboard", "--top", "-1"],
    ["live", "--limit", "-1"],
    ["summoner", "Faker", "--matches", "-3"],
])
def test_negative_counts_are_usage_errors(api_key, router, client_factory, capsys, argv):
    with pytest.raises(SystemExit) as info:
        run(argv, client_factory=client_factory)
    assert info.value.code == 2
    assert "must be 0 or more" in capsys.readouterr().err
    assert router.requests == []
