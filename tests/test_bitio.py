import io

import pytest

from hsearchiver.bitio import BitReader, BitWriter
from hsearchiver.constants import SIZE_OF_LCHAR


def _written(actions):
    stream = io.BytesIO()
    writer = BitWriter(stream)
    actions(writer)
    writer.flush()
    return stream.getvalue()


def test_single_set_bit_is_padded_to_high_bit():
    assert _written(lambda w: w.write(1, 1)) == b"\x80"


def test_flush_with_nothing_pending_writes_zero_byte():
    assert _written(lambda w: None) == b"\x00"


def test_full_byte_is_written_as_is():
    data = _written(lambda w: w.write(0xA5, 8))
    assert data[:1] == bytes([0xA5])
    assert len(data) == 2


@pytest.mark.parametrize("value", [0, 1, 255, 256, 257, 258, 511])
def test_lchar_round_trip(value):
    data = _written(lambda w: w.write(value, SIZE_OF_LCHAR))
    reader = BitReader(io.BytesIO(data))
    assert reader.read(SIZE_OF_LCHAR) == value


def test_sequence_round_trip():
    values = [3, 258, 0, 17, 511, 100]

    def actions(writer):
        for value in values:
            writer.write(value, SIZE_OF_LCHAR)

    reader = BitReader(io.BytesIO(_written(actions)))
    assert [reader.read(SIZE_OF_LCHAR) for _ in values] == values


def test_write_code_matches_bits_read():
    code = "1011001110"
    reader = BitReader(io.BytesIO(_written(lambda w: w.write_code(code))))
    assert "".join(str(reader.read(1)) for _ in code) == code


def test_write_code_rejects_other_characters():
    writer = BitWriter(io.BytesIO())
    with pytest.raises(ValueError):
        writer.write_code("012")


def test_write_rejects_negative_value():
    with pytest.raises(ValueError):
        BitWriter(io.BytesIO()).write(-1, 4)


def test_zero_bits_writes_nothing():
    stream = io.BytesIO()
    writer = BitWriter(stream)
    writer.write(7, 0)
    assert stream.getvalue() == b""


def test_read_past_end_raises():
    reader = BitReader(io.BytesIO(b"\xff"))
    assert reader.read(8) == 0xFF
    with pytest.raises(EOFError):
        reader.read(1)


def test_bits_yields_every_bit_of_stream():
    data = bytes([0x0F, 0xF0, 0x55])
    bits = list(BitReader(io.BytesIO(data)).bits())
    assert len(bits) == 8 * len(data)
    rebuilt = bytes(
        int("".join(map(str, bits[i : i + 8])), 2) for i in range(0, len(bits), 8)
    )
    assert rebuilt == data


def test_bits_continues_after_partial_read():
    reader = BitReader(io.BytesIO(b"\xff\x00"))
    reader.read(3)
    assert len(list(reader.bits())) == 13