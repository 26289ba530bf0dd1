import threading

from ouroboros.concurrency import start_thread


def test_runs_function_with_none():
    received = []
    done = threading.Event()

    def work(value):
        received.append(value)
        done.set()

    thread = start_thread(work, "ignored")
    assert done.wait(5)
    thread.join(5)
    assert not thread.is_alive()
    assert thread.daemon is True
    assert received == [None]


def test_thread_is_daemon():
    thread = start_thread(lambda _: None, None)
    thread.join(5)
    assert thread.daemon is True
    assert not thread.is_alive()


def test_prints_message(capsys):
    thread = start_thread(lambda _: None, None)
    thread.join(5)
    assert "[THREAD] Started new thread\n" in capsys.readouterr().out