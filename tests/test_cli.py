"""Tests for the interactive command-line front-end."""

import io

import pytest

from campus_navigator.cli import COMMANDS, ShellSession, main, parse_args, run_shell
from campus_navigator.config import AppConfig, GraphConfig

MAP_TEXT = "Buildings\nA\nB\nC\nEDGES\nA,B,5\nB,C,3\nA,C,10\n"


def _run(tmp_path, commands, map_text=MAP_TEXT, argv=None):
    map_path = tmp_path / "campus.txt"
    map_path.write_text(map_text, encoding="utf-8")
    stdout = io.StringIO()
    code = main(
        argv if argv is not None else [str(map_path)],
        stdin=io.StringIO(commands),
        stdout=stdout,
        config=AppConfig(),
    )
    return code, stdout.getvalue().splitlines()


def test_startup_banner_and_exit(tmp_path):
    code, lines = _run(tmp_path, "Exit\n")

    assert code == 0
    assert lines[0] == "Welcome to Campus Navigator!"
    assert lines[1] == "Loaded campus map with 3 buildings and 3 paths."
    assert any("DFS - To Do Depth First Search" in line for line in lines)


def test_mst_command_prints_accepted_edges(tmp_path):
    _, lines = _run(tmp_path, "MST\nExit\n")

    start = lines.index("Minimum Spanning Tree Results:")
    assert lines[start + 1 : start + 3] == ["B -> C (3 minutes)", "A -> B (5 minutes)"]


@pytest.mark.parametrize("command", ["DFS", "BFS"])
def test_traversal_commands_print_names(tmp_path, command):
    _, lines = _run(tmp_path, f"{command}\n  A \nExit\n")

    prompt = lines.index("Enter starting building")
    names = lines[prompt + 1].split(" ")
    assert names[0] == "A"
    assert sorted(names) == ["A", "B", "C"]


@pytest.mark.parametrize("command", ["DFS", "BFS"])
def test_unknown_start_building_is_reported(tmp_path, command):
    code, lines = _run(tmp_path, f"{command}\nObservatory\nExit\n")

    assert code == 0
    assert "Building not found" in lines


def test_depth_first_on_long_chain_map(tmp_path):
    names = [f"B{i}" for i in range(1500)]
    edges = [f"{a},{b},1" for a, b in zip(names, names[1:])]
    map_text = "\n".join(["Buildings", *names, "EDGES", *edges]) + "\n"

    code, lines = _run(tmp_path, "DFS\nB0\nExit\n", map_text=map_text)

    assert code == 0
    prompt = lines.index("Enter starting building")
    assert lines[prompt + 1].split(" ") == names


def test_unrecognized_command_reprompts(tmp_path):
    _, lines = _run(tmp_path, "dfs\nMST\nExit\n")

    assert lines.count("Invalid input, please try again") == 1
    assert "Minimum Spanning Tree Results:" in lines


def test_end_of_input_exits_cleanly(tmp_path):
    code, _ = _run(tmp_path, "MST\n")

    assert code == 0


def test_end_of_input_while_prompting_for_building(tmp_path):
    code, lines = _run(tmp_path, "BFS\n")

    assert code == 0
    assert lines[-1] == "Enter starting building"


def test_validation_failure_exits_zero(tmp_path):
    code, lines = _run(tmp_path, "Exit\n", map_text="h\nA\nB\nEDGES\nA,B,31\n")

    assert code == 0
    assert lines == ["Issue found with edges/weights"]


def test_unknown_building_in_map_fails_validation(tmp_path):
    code, lines = _run(tmp_path, "", map_text="h\nA\nB\nEDGES\nA,Z,3\n")

    assert code == 0
    assert lines == ["Issue found with edges/weights"]


def test_malformed_map_exits_nonzero(tmp_path):
    code, lines = _run(tmp_path, "Exit\n", map_text="h\nA\nB\nEDGES\nA,B,x\n")

    assert code == 1
    assert lines[0].startswith("Error occurred while reading file")


def test_missing_map_exits_nonzero(tmp_path):
    stdout = io.StringIO()

    code = main(
        [str(tmp_path / "nope.txt")],
        stdin=io.StringIO("Exit\n"),
        stdout=stdout,
        config=AppConfig(),
    )

    assert code == 1


def test_map_defaults_to_config(tmp_path):
    (tmp_path / "campus_map.txt").write_text(MAP_TEXT, encoding="utf-8")
    stdout = io.StringIO()

    code = main(
        [],
        stdin=io.StringIO("Exit\n"),
        stdout=stdout,
        config=AppConfig(graph=GraphConfig(data_dir=tmp_path)),
    )

    assert code == 0
    assert "Loaded campus map with 3 buildings and 3 paths." in stdout.getvalue()


def test_usage_error_exits_nonzero():
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["one.txt", "two.txt"])

    assert exc_info.value.code != 0


def test_shell_session_drives_handlers(triangle):
    class FakeService:
        def minimum_spanning_forest(self):
            return triangle.minimum_spanning_forest()

    stdout = io.StringIO()
    session = ShellSession(FakeService(), stdin=io.StringIO("MST\nExit\nMST\n"), stdout=stdout)

    run_shell(session)

    assert not session.running
    assert stdout.getvalue().count("Minimum Spanning Tree Results:") == 1
    assert set(COMMANDS) == {"DFS", "BFS", "MST", "Exit"}


def test_log_level_option_is_case_insensitive():
    assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"


def test_unknown_log_level_is_a_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--log-level", "LOUD"])

    assert exc_info.value.code == 2


@pytest.mark.parametrize(
    "env",
    [
        {"CAMPUS_GRAPH_MAX_DISTANCE": "far"},
        {"CAMPUS_GRAPH_MIN_DISTANCE": "40"},
        {"CAMPUS_LOG_LEVEL": "LOUD"},
    ],
)
def test_bad_environment_configuration_exits_nonzero(monkeypatch, tmp_path, env):
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    stdout = io.StringIO()

    code = main([str(tmp_path / "campus.txt")], stdin=io.StringIO("Exit\n"), stdout=stdout)

    assert code == 1
    assert stdout.getvalue().startswith("Invalid configuration")
