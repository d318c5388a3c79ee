from io import StringIO

from pytest import fixture

from rpncalc.machine import Machine
from rpncalc.session import Session


@fixture
def machine() -> Machine:
    return Machine()


@fixture
def session(machine: Machine) -> Session:
    '''
    Session around the machine fixture, printing to sys.stdout.

    Use with capsys.
    '''
    return Session(machine=machine)


@fixture
def stdin(monkeypatch):
    '''
    Return a function that replaces sys.stdin with the given text.

    Not a tty, so the CLI won't reach for prompt_toolkit.
    '''
    def feed(text: str) -> None:
        monkeypatch.setattr('sys.stdin', StringIO(text))
    return feed
