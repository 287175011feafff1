import subprocess
import pytest
from passprovider.lib.notify import Notifier, NotificationError


def runner_returning(code, stderr=b''):
    calls = []
    def run(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, code, b'', stderr)
    run.calls = calls
    return run


def test_command_carries_transient_hint():
    run = runner_returning(0)
    assert Notifier(runner=run).notify('github.com', 'Password copied to clipboard')
    cmd = run.calls[0]
    assert cmd[0] == 'notify-send'
    assert '--app-name=Pass' in cmd and '--icon=dialog-password' in cmd
    assert '--expire-time=4000' in cmd
    assert '--hint=boolean:transient:true' in cmd
    assert cmd[-2:] == ['github.com', 'Password copied to clipboard']


def test_send_raises_on_failure():
    with pytest.raises(NotificationError, match='no bus'):
        Notifier(runner=runner_returning(1, b'no bus')).send('a', 'b')


def test_notify_swallows_failures():
    def missing(cmd, **kwargs):
        raise FileNotFoundError('notify-send')
    assert Notifier(runner=missing).notify('a', 'b') is False
    assert Notifier(runner=runner_returning(1)).notify('a', 'b') is False
