from dataclasses import dataclass, field

import pytest

from evmcore.merkle_trie import (
    TrieAccount,
    keccak256,
    log_rlp_hash,
    rlp_encode,
    sec_trie_root,
    state_merkle_trie_root,
    trie_account_rlp,
    trie_root,
)

EMPTY_TRIE_ROOT = bytes.fromhex(
    "56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421"
)


@dataclass
class _Log:
    address: bytes
    topics: list = field(default_factory=list)
    data: bytes = b""


def test_keccak_of_empty_input():
    assert keccak256(b"") == bytes.fromhex(
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_rlp_short_string():
    assert rlp_encode(b"dog") == bytes.fromhex("83646f67")


def test_rlp_single_low_byte_is_itself():
    assert rlp_encode(b"\x7f") == b"\x7f"
    assert rlp_encode(0x7F) == b"\x7f"


def test_rlp_zero_is_empty_string():
    assert rlp_encode(0) == rlp_encode(b"")


def test_rlp_list_wraps_items():
    items = [b"cat", b"dog"]
    payload = rlp_encode(b"cat") + rlp_encode(b"dog")
    assert rlp_encode(items) == bytes([0xC0 + len(payload)]) + payload


def test_rlp_long_string_uses_length_of_length():
    data = bytes(100)
    encoded = rlp_encode(data)
    assert encoded[:2] == bytes([0xB8, 100])
    assert encoded[2:] == data


def test_rlp_integer_is_big_endian():
    assert rlp_encode(0x0400) == rlp_encode(b"\x04\x00")


def test_rlp_rejects_bad_items():
    with pytest.raises(ValueError):
        rlp_encode(-1)
    with pytest.raises(TypeError):
        rlp_encode("text")


def test_empty_trie_root():
    assert sec_trie_root([]) == EMPTY_TRIE_ROOT
    assert trie_root([]) == EMPTY_TRIE_ROOT
    assert state_merkle_trie_root([]) == EMPTY_TRIE_ROOT


def test_single_entry_root_is_hashed_leaf():
    key, value = b"key", b"value"
    leaf = rlp_encode([b"\x20" + keccak256(key), value])
    assert sec_trie_root([(key, value)]) == keccak256(leaf)


def test_root_is_independent_of_order():
    entries = [(bytes([i]), bytes([i]) * (i + 1)) for i in range(40)]
    assert sec_trie_root(entries) == sec_trie_root(list(reversed(entries)))


def test_later_duplicate_key_wins():
    assert sec_trie_root([(b"a", b"1"), (b"a", b"2")]) == sec_trie_root([(b"a", b"2")])


def test_root_depends_on_values():
    base = [(bytes([i]), b"x") for i in range(10)]
    changed = base[:-1] + [(bytes([9]), b"y")]
    assert sec_trie_root(base) != sec_trie_root(changed)
    assert len(sec_trie_root(base)) == 32


def test_account_rlp_with_empty_storage():
    account = TrieAccount(nonce=3, balance=10**18)
    expected = rlp_encode([3, 10**18, EMPTY_TRIE_ROOT, keccak256(b"")])
    assert trie_account_rlp(account) == expected


def test_zero_storage_slots_are_ignored():
    plain = TrieAccount(storage={1: 5})
    with_zero = TrieAccount(storage={1: 5, 2: 0})
    assert trie_account_rlp(plain) == trie_account_rlp(with_zero)
    assert trie_account_rlp(plain) != trie_account_rlp(TrieAccount())


def test_state_root_matches_trie_root():
    accounts = [
        (bytes([1]) * 20, TrieAccount(nonce=1, balance=5)),
        (bytes([2]) * 20, TrieAccount(storage={0: 1})),
    ]
    expected = trie_root((address, trie_account_rlp(acc)) for address, acc in accounts)
    assert state_merkle_trie_root(accounts) == expected
    assert state_merkle_trie_root(reversed(accounts)) == expected


def test_log_hash_of_no_logs():
    assert log_rlp_hash([]) == keccak256(rlp_encode([]))


def test_log_hash_covers_fields():
    address = bytes(range(20))
    log = _Log(address, [bytes(32)], b"\x01")
    assert log_rlp_hash([log]) == keccak256(rlp_encode([[address, [bytes(32)], b"\x01"]]))
    assert log_rlp_hash([log]) != log_rlp_hash([_Log(address, [bytes(32)], b"\x02")])