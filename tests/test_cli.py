"""Tests for the command-line entry point."""

from __future__ import annotations

import json

import pytest

from program_engine.cli import main


@pytest.fixture
def profile_file(tmp_path, profile_payload_factory):
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(profile_payload_factory(goal="strength")))
    return path


class TestCli:
    def test_generate_to_stdout(self, profile_file, capsys) -> None:
        code = main(["generate", str(profile_file), "--start", "2026-10-19", "--seed", "7"])
        assert code == 0
        plan = json.loads(capsys.readouterr().out)
        assert plan["workoutSplit"] == "push_pull_legs"
        assert len(plan["sessions"]) == 12
        assert plan["sessions"][0]["date"] == "Monday, October 19"

    def test_generate_to_file(self, profile_file, tmp_path) -> None:
        out = tmp_path / "plan.json"
        code = main(["generate", str(profile_file), "--seed", "7", "-o", str(out)])
        assert code == 0
        assert json.loads(out.read_text())["user"]["name"] == "Jamie"

    def test_same_seed_same_sessions(self, profile_file, capsys) -> None:
        args = ["generate", str(profile_file), "--start", "2026-10-19", "--seed", "3"]
        main(args)
        first = json.loads(capsys.readouterr().out)
        main(args)
        second = json.loads(capsys.readouterr().out)
        assert first["sessions"] == second["sessions"]

    def test_invalid_profile_exits_2(self, tmp_path, profile_payload_factory) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(profile_payload_factory(experience="elite")))
        assert main(["generate", str(path)]) == 2

    def test_missing_file_exits_2(self, tmp_path) -> None:
        assert main(["generate", str(tmp_path / "nope.json")]) == 2

    def test_malformed_json_exits_2(self, tmp_path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        assert main(["generate", str(path)]) == 2

    @pytest.mark.parametrize("raw", [[1, 2], "profile"])
    def test_non_object_json_exits_2(self, tmp_path, raw) -> None:
        path = tmp_path / "list.json"
        path.write_text(json.dumps(raw))
        assert main(["generate", str(path)]) == 2

    def test_fractional_days_exits_2(self, tmp_path, profile_payload_factory) -> None:
        path = tmp_path / "days.json"
        path.write_text(json.dumps(profile_payload_factory(days_per_week=2.5)))
        assert main(["generate", str(path)]) == 2

    def test_unknown_log_level_rejected(self, profile_file) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["generate", str(profile_file), "--log-level", "bogus"])
        assert excinfo.value.code == 2

    def test_log_level_is_case_insensitive(self, profile_file, capsys) -> None:
        assert main(["generate", str(profile_file), "--seed", "1", "--log-level", "debug"]) == 0
        assert json.loads(capsys.readouterr().out)["workoutSplit"] == "push_pull_legs"

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])
