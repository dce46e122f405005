import pytest

from sysdemos.counting import (
    count_unlocked,
    count_with_lock,
    count_with_monitor,
    count_with_semaphore,
    main,
)


@pytest.mark.parametrize("n,threads", [(1000, 2), (500, 3), (10, 1)])
def test_count_with_lock_is_exact(n, threads):
    assert count_with_lock(n, threads) == n * threads


def test_count_unlocked_single_thread_exact():
    assert count_unlocked(1000, 1) == 1000


def test_count_unlocked_never_exceeds_total():
    result = count_unlocked(2000, 2)
    assert 0 < result <= 2 * 2000


@pytest.mark.parametrize("per_thread", [1, 50, 300])
def test_count_with_monitor(per_thread):
    assert count_with_monitor(per_thread) == 2 * per_thread


@pytest.mark.parametrize("per_thread", [1, 50, 300])
def test_count_with_semaphore(per_thread):
    assert count_with_semaphore(per_thread) == 2 * per_thread


def test_zero_work():
    assert count_with_monitor(0) == 0
    assert count_with_semaphore(0) == 0


def test_main_lock_reports_ok(capsys):
    assert main(["lock", "100"]) == 0
    out = capsys.readouterr().out
    assert "starting test. final count should be 200" in out
    assert "****** OK. Final count is 200" in out


def test_main_semaphore_reports_ok(capsys):
    assert main(["semaphore", "20"]) == 0
    assert "****** OK." in capsys.readouterr().out


def test_main_unknown_test(capsys):
    assert main(["nonsense"]) == 2
    assert "unknown test" in capsys.readouterr().err


def test_main_bad_count(capsys):
    assert main(["lock", "many"]) == 2
    assert "invalid count" in capsys.readouterr().err