"""Shared fixtures for eks-login tests."""

import subprocess

import pytest


class FakeCommands:
    """Stand-in for subprocess.run that answers by command prefix."""

    def __init__(self):
        self.responses = {}
        self.calls = []

    def set(self, *prefix, returncode=0, stdout="", stderr=""):
        self.responses[tuple(prefix)] = (returncode, stdout, stderr)

    def __call__(self, args, **kwargs):
        args = list(args)
        self.calls.append((args, kwargs))
        match = None
        for prefix in self.responses:
            if tuple(args[:len(prefix)]) == prefix and (match is None or len(prefix) > len(match)):
                match = prefix
        returncode, stdout, stderr = self.responses.get(match, (0, "", ""))
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)

    def find(self, *prefix):
        return [(args, kwargs) for args, kwargs in self.calls if tuple(args[:len(prefix)]) == prefix]

    def called(self, *prefix):
        return bool(self.find(*prefix))


@pytest.fixture
def fake_commands(mocker):
    """Patch subprocess.run and PATH lookups so no real aws or kubectl runs."""
    commands = FakeCommands()
    mocker.patch("subprocess.run", side_effect=commands)
    mocker.patch("shutil.which", side_effect=lambda name: f"/usr/local/bin/{name}")
    return commands
