import csv
import json
from io import StringIO

import httpx

from osrs_hiscores import cli
from osrs_hiscores.client import HiscoresClient
from osrs_hiscores.config import ClientSettings
from osrs_hiscores.export import CSV_HEADERS, export_player_to_csv, player_to_json
from osrs_hiscores.models import Activity, Player, Skill


def _player() -> Player:
    return Player(
        rsn="Zezima",
        skills=[
            Skill(id=0, name="Overall", rank=1, level=100, experience=200_000),
            Skill(id=1, name="Attack", rank=2, level=50, experience=101_333),
        ],
        activities=[Activity(id=0, name="League Points", rank=-1, score=0)],
    )


def _patch_client(monkeypatch, handler) -> None:
    def factory(*args, **kwargs):
        return HiscoresClient(
            ClientSettings(base_url="https://hiscores.test"),
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )

    monkeypatch.setattr(cli, "HiscoresClient", factory)


def test_export_player_to_csv():
    rows = list(csv.reader(StringIO(export_player_to_csv(_player()))))
    assert tuple(rows[0]) == CSV_HEADERS
    assert rows[1] == ["skill", "0", "Overall", "1", "100", "200000", ""]
    assert rows[3] == ["activity", "0", "League Points", "-1", "", "", "0"]


def test_player_to_json():
    payload = json.loads(player_to_json(_player()))
    assert payload["rsn"] == "Zezima"
    assert payload["skills"][1]["experience"] == 101_333
    assert payload["activities"][0]["score"] == 0


def test_render_text_layout():
    text = cli.render_text(_player(), virtual_levels=True)
    assert text.splitlines()[:2] == ["Player: Zezima", "Level Type: Virtual"]
    assert "Attack: Level 50 (Rank 2, XP 101333)" in text
    assert "League Points: Score 0 (Rank -1)" in text


def test_main_joins_name_and_prints(monkeypatch, capsys):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["player"])
        return httpx.Response(200, text=player_json())

    def player_json() -> str:
        return json.dumps({"skills": [{"id": 1, "name": "Attack", "rank": 1, "level": 99, "xp": 200000000}]})

    _patch_client(monkeypatch, handler)

    assert cli.main(["eow", "btw", "--virtual"]) == 0
    out = capsys.readouterr().out
    assert seen == ["eow btw"]
    assert "Player: eow btw" in out
    assert "Attack: Level 126" in out


def test_main_reports_transport_failure(monkeypatch, capsys):
    _patch_client(monkeypatch, lambda request: httpx.Response(503))

    assert cli.main(["Zezima"]) == 1
    assert "Error fetching player data" in capsys.readouterr().err


def test_render_text_limits_to_selected_skills():
    text = cli.render_text(_player(), virtual_levels=False, skills=["Attack"])
    lines = text.splitlines()
    assert "Activities:" not in lines
    assert "Overall" not in text
    # Level 51 starts at 111,945 experience.
    assert "Attack: Level 50 (Rank 2, XP 101333) - 10612 XP to next level" in lines


def test_main_resolves_filters_case_insensitively(monkeypatch, capsys):
    body = json.dumps(
        {
            "skills": [{"id": 1, "name": "Attack", "rank": 1, "level": 99, "xp": 13_034_431}],
            "activities": [{"id": 22, "name": "Chambers of Xeric", "rank": 10, "score": 7}],
        }
    )
    _patch_client(monkeypatch, lambda request: httpx.Response(200, text=body))

    assert cli.main(["Zezima", "--skill", "attack", "--activity", "chambers of xeric"]) == 0
    out = capsys.readouterr().out
    assert "Attack: Level 99 (Rank 1, XP 13034431) - 0 XP to next level" in out
    assert "Chambers of Xeric: Score 7 (Rank 10)" in out


def test_main_rejects_unknown_skill(monkeypatch, capsys):
    _patch_client(monkeypatch, lambda request: httpx.Response(500))

    assert cli.main(["Zezima", "--skill", "Sailing"]) == 2
    assert "Unknown skill" in capsys.readouterr().err
