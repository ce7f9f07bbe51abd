import pytest

from fieldseal.crypto import xor_mask
from fieldseal.crypto.xor_mask import XorMask


@pytest.mark.unit
def test_apply_repeats_key():
    assert xor_mask.apply(b"\x01\x02", b"\x00\x00\x00") == b"\x01\x02\x01"
    assert xor_mask.apply(b"\xff", b"\x0f\xf0") == b"\xf0\x0f"


@pytest.mark.unit
@pytest.mark.parametrize("key", [b"\x01", b"abc", bytes(range(1, 33))])
@pytest.mark.parametrize("message", [b"", b"a", b"supersecret", bytes(range(256)) * 3])
def test_apply_is_an_involution(key, message):
    masked = xor_mask.apply(key, message)
    assert len(masked) == len(message)
    assert xor_mask.apply(key, masked) == message


@pytest.mark.unit
def test_empty_key_is_rejected():
    with pytest.raises(ValueError):
        xor_mask.apply(b"", b"data")
    with pytest.raises(ValueError):
        XorMask(b"")


@pytest.mark.unit
def test_non_bytes_input_is_rejected():
    with pytest.raises(TypeError):
        xor_mask.apply(b"k", "text")


@pytest.mark.unit
def test_bound_mask_accepts_string_key():
    mask = XorMask("key")
    masked = mask.apply(b"plaintext")
    assert masked != b"plaintext"
    assert masked == xor_mask.apply(b"key", b"plaintext")
    assert mask.apply(masked) == b"plaintext"
