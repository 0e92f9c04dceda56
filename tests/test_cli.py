import json
from unittest.mock import patch

from myconstituency import cli


def test_votes_prints_json_and_exit_code(capsys):
    with patch.object(cli.LatestAlbertaVotes, "latest_votes", return_value=({"error": "Missing name"}, 400)) as votes:
        exit_code = cli.main(["--env", "test", "votes", "--riding", "Calgary-Centre"])

    assert exit_code == 1
    assert json.loads(capsys.readouterr().out) == {"error": "Missing name"}
    votes.assert_called_once_with("", "Calgary-Centre", False)


def test_lookup_success(capsys):
    async def fake_lookup(config, postal):
        return {"postal": postal.upper(), "reps": {"municipal": [], "provincial": [], "federal": []}}, 200

    with patch.object(cli, "lookup_representatives", fake_lookup):
        exit_code = cli.main(["--env", "test", "lookup", "t2p1j9"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out)["postal"] == "T2P1J9"


def test_no_subcommand_prints_help(capsys):
    assert cli.main([]) == 0
    assert "votes" in capsys.readouterr().out
