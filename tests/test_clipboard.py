import threading
import pytest
from passprovider.lib.clipboard import ClipboardSession, ClipboardError, ThreadScheduler


def test_copy_writes_and_schedules(session, clipboard, scheduler, clock):
    ticket = session.copy_with_expiry('abc123')
    assert clipboard.value == 'abc123'
    assert ticket.generation == 1
    assert ticket.scheduled_at == clock.now and ticket.delay == 40
    assert ticket.deadline == clock.now + 40
    assert [d for d, _ in scheduler.pending] == [40]


def test_expire_clears_with_empty_string(session, clipboard, scheduler):
    session.copy_with_expiry('abc123')
    assert scheduler.fire(0) is True
    assert clipboard.value == ''
    assert clipboard.writes == ['abc123', '']


def test_stale_timer_does_not_wipe_newer_copy(session, clipboard, scheduler, clock):
    session.copy_with_expiry('first')
    clock.advance(20)
    session.copy_with_expiry('second')
    clock.advance(20)
    # first timer fires while the second copy is still live
    assert scheduler.fire(0) is False
    assert clipboard.value == 'second'
    assert scheduler.fire(1) is True
    assert clipboard.value == ''


def test_rapid_double_copy_clears_exactly_once(session, clipboard, scheduler):
    session.copy_with_expiry('same')
    session.copy_with_expiry('same')
    assert scheduler.fire_all() == [False, True]
    assert clipboard.writes.count('') == 1


def test_expire_after_clear_is_noop(session, clipboard, scheduler):
    session.copy_with_expiry('abc')
    scheduler.fire(0)
    assert scheduler.fire(0) is False
    assert clipboard.writes == ['abc', '']


def test_write_failure_raises_and_schedules_nothing(scheduler):
    def broken(_text):
        raise RuntimeError('no display')
    s = ClipboardSession(set_text=broken, scheduler=scheduler, delay=40)
    with pytest.raises(ClipboardError):
        s.copy_with_expiry('abc')
    assert scheduler.pending == []
    assert s.generation == 0


def test_close_clears_live_value(session, clipboard):
    session.copy_with_expiry('abc')
    session.close()
    assert clipboard.value == ''
    session.close()
    assert clipboard.writes == ['abc', '']


def test_delay_defaults_to_setting(monkeypatch, clipboard, scheduler):
    monkeypatch.delenv('PASS_CLIPBOARD_TIMEOUT', raising=False)
    assert ClipboardSession(set_text=clipboard, scheduler=scheduler).delay == 40
    monkeypatch.setenv('PASS_CLIPBOARD_TIMEOUT', '5')
    assert ClipboardSession(set_text=clipboard, scheduler=scheduler).delay == 5


def test_thread_scheduler_runs_and_joins():
    fired = threading.Event()
    sched = ThreadScheduler()
    sched.schedule(0.01, fired.set)
    sched.join(timeout=2)
    assert fired.is_set()
    assert sched.pending() == 0


def test_thread_scheduler_cancel_all():
    fired = threading.Event()
    sched = ThreadScheduler()
    sched.schedule(30, fired.set)
    sched.cancel_all()
    assert not fired.is_set()
    assert sched.pending() == 0


def test_concurrent_copies_leave_one_clear():
    writes = []
    session = ClipboardSession(set_text=writes.append, scheduler=ThreadScheduler(), delay=0.5)
    n = 50
    barrier = threading.Barrier(n)

    def worker(i):
        barrier.wait()
        session.copy_with_expiry(f'value-{i}')

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    session.join(timeout=5)
    assert session.generation == n
    assert writes.count('') == 1
    assert writes[-1] == ''
    assert len(writes) == n + 1
