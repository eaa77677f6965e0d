import pytest
from hypothesis import given
from hypothesis import strategies as st

from galois_aead.ghash import GHash

# The multiplicative identity of the field in GCM bit order.
ONE = bytes([0x80]) + bytes(15)

blocks16 = st.binary(min_size=16, max_size=16)


def test_empty_hash_is_zero_block():
    h = GHash(bytes(range(16)))
    assert h.finalize() == bytes(16)


@given(blocks16)
def test_identity_key_returns_block(block):
    h = GHash(ONE)
    h.update([block])
    assert h.finalize() == block


@given(blocks16, blocks16)
def test_single_block_multiplication_commutes(a, b):
    h1 = GHash(a)
    h1.update([b])
    h2 = GHash(b)
    h2.update([a])
    assert h1.finalize() == h2.finalize()


@given(blocks16, st.binary(max_size=80))
def test_update_padded_matches_explicit_padding(key, data):
    padded = data + bytes((-len(data)) % 16)
    h1 = GHash(key)
    h1.update_padded(data)
    h2 = GHash(key)
    h2.update([padded[i : i + 16] for i in range(0, len(padded), 16)])
    assert h1.finalize() == h2.finalize()


@given(blocks16, blocks16, blocks16)
def test_copy_is_independent(key, a, b):
    h = GHash(key)
    h.update([a])
    snapshot = h.copy()
    h.update([b])
    fresh = GHash(key)
    fresh.update([a])
    assert snapshot.finalize() == fresh.finalize()
    snapshot.update([b])
    assert snapshot.finalize() == h.finalize()


def test_gcm_spec_worked_example():
    h = GHash(bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"))
    h.update_padded(bytes.fromhex("0388dace60b6a392f328c2b971b2fe78"))
    h.update([bytes(8) + (128).to_bytes(8, "big")])
    assert h.finalize() == bytes.fromhex("f38cbb1ad69223dcc3457ae5b6b0f885")


@pytest.mark.parametrize("size", [0, 15, 17, 32])
def test_bad_key_length(size):
    with pytest.raises(ValueError):
        GHash(bytes(size))


def test_bad_block_length():
    h = GHash(ONE)
    with pytest.raises(ValueError):
        h.update([bytes(15)])


def test_update_rejects_raw_bytes():
    h = GHash(ONE)
    with pytest.raises(TypeError):
        h.update(bytes(16))