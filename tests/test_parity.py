import io

import pytest

from sysdemos.parity import MESSAGE0, MESSAGE1, main, parity_read, parity_write


def _write(data0, data1):
    outs = [io.BytesIO() for _ in range(3)]
    count = parity_write(*outs, data0, data1)
    return count, [out.getvalue() for out in outs]


def test_write_returns_count_and_copies_data():
    count, (b0, b1, b2) = _write(MESSAGE0, MESSAGE1)
    assert count == len(MESSAGE0)
    assert b0 == MESSAGE0
    assert b1 == MESSAGE1
    assert len(b2) == len(MESSAGE0)


def test_lost_second_block_is_recovered():
    _, (b0, _, b2) = _write(MESSAGE0, MESSAGE1)
    assert parity_read(io.BytesIO(b0), io.BytesIO(b2), len(b0)) == MESSAGE1


def test_lost_first_block_is_recovered():
    _, (_, b1, b2) = _write(MESSAGE0, MESSAGE1)
    assert parity_read(io.BytesIO(b1), io.BytesIO(b2), len(b1)) == MESSAGE0


def test_parity_of_identical_blocks_is_zero():
    _, (_, _, b2) = _write(b"same", b"same")
    assert b2 == bytes(4)


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        _write(b"abc", b"ab")


def test_main_rebuilds_and_cleans_up(tmp_path, capsys):
    assert main([str(tmp_path)]) == 0
    assert capsys.readouterr().out == "f1 contents are = testing 123\n\n"
    assert list(tmp_path.iterdir()) == []