from rc5service.core.padding import pad, unpad


def test_pad_to_next_boundary():
    assert pad(b"Hello", 8) == b"Hello\x03\x03\x03"
    assert pad(b"A", 4) == b"A\x03\x03\x03"
    assert pad(b"ABCDEFGHI", 16) == b"ABCDEFGHI" + b"\x07" * 7


def test_pad_leaves_aligned_data_alone():
    assert pad(b"ABCDEFGH", 8) == b"ABCDEFGH"
    assert pad(b"ABCD", 4) == b"ABCD"
    assert pad(b"", 8) == b""


def test_unpad_strips_padding():
    assert unpad(b"Hello\x03\x03\x03", 8) == b"Hello"
    assert unpad(b"A" + b"\x0f" * 15, 16) == b"A"


def test_unpad_empty():
    assert unpad(b"", 8) == b""


def test_unpad_is_lenient_on_invalid_trailing_byte():
    # zero and values above the block size are left untouched
    assert unpad(b"ABC\x00", 4) == b"ABC\x00"
    assert unpad(b"ABCDEFG\x09", 8) == b"ABCDEFG\x09"
    assert unpad(b"ABCDEFGH", 8) == b"ABCDEFGH"


def test_unpad_count_longer_than_data():
    assert unpad(b"\x05", 8) == b"\x05"


def test_unpad_only_reads_trailing_byte():
    assert unpad(b"AB\x07\x02", 4) == b"AB"


def test_pad_then_unpad():
    for length in range(0, 33):
        data = b"x" * length
        assert unpad(pad(data, 16), 16) == data
