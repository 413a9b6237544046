"""Unit tests for helpers.py."""

import subprocess

import pytest

from ekslogin.exceptions import CommandFailedError, ExecutableNotFoundError, SelectionRequiredError
from ekslogin.helpers import (
    check_dependencies,
    get_app_path,
    parse_choice,
    prompt_for_choice,
    run_command,
    run_interactive,
)


def test_get_app_path_found(mocker):
    mocker.patch("shutil.which", return_value="/usr/local/bin/aws")
    mocker.patch("os.name", "posix")

    assert get_app_path("aws") == "/usr/local/bin/aws"


def test_get_app_path_missing(mocker):
    mocker.patch("shutil.which", return_value=None)

    with pytest.raises(ExecutableNotFoundError, match="'kubectl' not found in PATH"):
        get_app_path("kubectl")


def test_get_app_path_invalid_name():
    with pytest.raises(ValueError):
        get_app_path("  ")


def test_check_dependencies_all_present(mocker):
    mocker.patch("shutil.which", side_effect=lambda name: f"/bin/{name}")

    assert check_dependencies() == {"aws": "/bin/aws", "kubectl": "/bin/kubectl"}


def test_check_dependencies_names_first_missing_tool(mocker):
    """The first missing tool is reported and later tools are not looked up."""
    which = mocker.patch("shutil.which", side_effect=[None, "/bin/kubectl"])

    with pytest.raises(ExecutableNotFoundError, match="'aws'"):
        check_dependencies()
    assert which.call_count == 1


def test_run_command_returns_stripped_stdout(mocker):
    mocker.patch(
        "subprocess.run",
        return_value=subprocess.CompletedProcess([], 0, stdout="  hello\n", stderr=""),
    )

    assert run_command(["echo", "hello"]) == "hello"


def test_run_command_failure_includes_stderr(mocker):
    mocker.patch(
        "subprocess.run",
        return_value=subprocess.CompletedProcess([], 255, stdout="", stderr="boom\n"),
    )

    with pytest.raises(CommandFailedError) as excinfo:
        run_command(["aws", "configure", "list-profiles"])

    assert excinfo.value.returncode == 255
    assert excinfo.value.stderr == "boom"
    assert "stderr: boom" in str(excinfo.value)


def test_run_command_spawn_failure(mocker):
    mocker.patch("subprocess.run", side_effect=FileNotFoundError("no such file"))

    with pytest.raises(CommandFailedError, match="could not run aws"):
        run_command(["aws", "--version"])


def test_run_interactive_does_not_capture_output(mocker):
    """Interactive commands must inherit the terminal streams."""
    mock_run = mocker.patch(
        "subprocess.run", return_value=subprocess.CompletedProcess([], 0)
    )

    run_interactive(["aws", "sso", "login"], "SSO login failed")

    kwargs = mock_run.call_args.kwargs
    assert "capture_output" not in kwargs
    assert "stdout" not in kwargs
    assert "stdin" not in kwargs


def test_run_interactive_failure(mocker):
    mocker.patch("subprocess.run", return_value=subprocess.CompletedProcess([], 1))

    with pytest.raises(CommandFailedError, match="SSO login failed"):
        run_interactive(["aws", "sso", "login"], "SSO login failed")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 0),
        (" 3 \n", 2),
        ("0", -1),
        ("-1", -1),
        ("4", -1),
        ("two", -1),
        ("", -1),
        ("1.5", -1),
        ("1_0", -1),
        ("٣", -1),
        ("+2", 1),
    ],
)
def test_parse_choice(raw, expected):
    assert parse_choice(raw, 3) == expected


def test_prompt_for_choice_single_option_does_not_prompt(mocker):
    mock_prompt = mocker.patch("typer.prompt")

    assert prompt_for_choice("profile", "Profiles:", ["only"]) == "only"
    mock_prompt.assert_not_called()


def test_prompt_for_choice_selects_second(mocker):
    mocker.patch("typer.prompt", return_value="2")

    assert prompt_for_choice("cluster", "Clusters:", ["a", "b", "c"]) == "b"


def test_prompt_for_choice_reprompts_until_valid(mocker):
    """Invalid answers never advance; the first in-range answer wins."""
    mock_prompt = mocker.patch("typer.prompt", side_effect=["abc", "0", "-2", "9", "3"])

    assert prompt_for_choice("cluster", "Clusters:", ["a", "b", "c"]) == "c"
    assert mock_prompt.call_count == 5
    assert mock_prompt.call_args.args[0] == "Select cluster (1-3)"


def test_prompt_for_choice_non_interactive(mocker):
    mock_prompt = mocker.patch("typer.prompt")

    with pytest.raises(SelectionRequiredError, match="--profile"):
        prompt_for_choice("profile", "Profiles:", ["a", "b"], interactive=False)
    mock_prompt.assert_not_called()


def test_parse_choice_rejects_digit_separators():
    """Underscore groups would otherwise reach entry 10 of a long list."""
    assert parse_choice("1_0", 12) == -1


def test_run_command_tolerates_undecodable_output(mocker):
    mock_run = mocker.patch(
        "subprocess.run",
        return_value=subprocess.CompletedProcess([], 0, stdout="caf�\n", stderr=""),
    )

    assert run_command(["kubectl", "cluster-info"]) == "caf�"
    assert mock_run.call_args.kwargs["errors"] == "replace"
