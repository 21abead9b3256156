from __future__ import annotations

import subprocess
from unittest import mock

import pytest

from hostident.exceptions import ExternalCommandError
from hostident.utils.commands import find_program
from hostident.utils.commands import run_program
from testing.programs import FakeProgramFactory


def test_find_program(fake_program: FakeProgramFactory) -> None:
    path = fake_program('hostname')
    assert find_program('hostname') == str(path)
    assert find_program('dnsdomainname') is None


def test_run_program(fake_program: FakeProgramFactory) -> None:
    fake_program('domainname', 'example.com\n')
    assert run_program('domainname') == 'example.com\n'


def test_run_program_empty_output(fake_program: FakeProgramFactory) -> None:
    fake_program('domainname')
    assert run_program('domainname') == ''


def test_run_program_missing(empty_path: str) -> None:
    with pytest.raises(ExternalCommandError, match='not found') as exc_info:
        run_program('domainname')
    assert exc_info.value.program == 'domainname'
    assert exc_info.value.returncode is None


def test_run_program_nonzero_exit(fake_program: FakeProgramFactory) -> None:
    fake_program('domainname', 'partial\n', returncode=3)
    with pytest.raises(ExternalCommandError, match='status 3') as exc_info:
        run_program('domainname')
    assert exc_info.value.returncode == 3


def test_run_program_timeout(fake_program: FakeProgramFactory) -> None:
    fake_program('domainname', 'example.com\n', delay=5)
    with pytest.raises(ExternalCommandError, match='timed out'):
        run_program('domainname', timeout=0.1)


def test_run_program_failed_to_start(
    fake_program: FakeProgramFactory,
) -> None:
    fake_program('domainname')
    with mock.patch(
        'subprocess.run',
        side_effect=PermissionError('permission denied'),
    ):
        with pytest.raises(ExternalCommandError, match='failed to start'):
            run_program('domainname')


def test_run_program_passes_timeout(fake_program: FakeProgramFactory) -> None:
    path = fake_program('hostname')
    completed = subprocess.CompletedProcess([str(path)], 0, 'out', '')
    with mock.patch('subprocess.run', return_value=completed) as mocked:
        assert run_program('hostname', timeout=2.5) == 'out'
    mocked.assert_called_once()
    assert mocked.call_args.args[0] == [str(path)]
    assert mocked.call_args.kwargs['timeout'] == 2.5
