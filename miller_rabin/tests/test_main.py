import io
import logging

import pytest

from ..__main__ import main


@pytest.mark.parametrize(
    ('n', 'verdict'),
    [
        ('17', 'PRIME'),
        ('341', 'COMPOSITE'),
        ('2', 'PRIME'),
        ('1', 'COMPOSITE'),
        ('7919', 'PRIME'),
        ('1000000007', 'PRIME'),
        ('-5', 'COMPOSITE'),
    ],
)
def test_verdict(n: str, verdict: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([n]) == 0
    assert capsys.readouterr().out == f'{n} is {verdict}\n'


def test_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr('sys.stdin', io.StringIO('9223372036854775783\n'))
    assert main([]) == 0
    assert capsys.readouterr().out == 'Enter a number: 9223372036854775783 is PRIME\n'


def test_empty_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr('sys.stdin', io.StringIO(''))
    with pytest.raises(SystemExit) as e:
        main([])
    assert e.value.code == 2  # noqa: PLR2004


def test_bases(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(['2047', '--bases', '2']) == 0
    assert capsys.readouterr().out == '2047 is PRIME\n'

    assert main(['2047', '--bases', '2,3']) == 0
    assert capsys.readouterr().out == '2047 is COMPOSITE\n'


def test_verbose(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger='miller_rabin'):
        assert main(['-v', '341']) == 0
    assert '2 is a witness for compositeness of 341' in caplog.text


@pytest.mark.parametrize('n', ['abc', '1.5', '9223372036854775808', '-9223372036854775809'])
def test_invalid_input(n: str) -> None:
    with pytest.raises(SystemExit) as e:
        main([n])
    assert e.value.code == 2  # noqa: PLR2004


def test_invalid_bases() -> None:
    with pytest.raises(SystemExit):
        main(['17', '--bases', '1,2'])
    with pytest.raises(SystemExit):
        main(['17', '--bases', 'x'])
