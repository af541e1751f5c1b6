"""RLP encoding, Merkle Patricia trie roots and state test root hashes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import groupby
from os.path import commonprefix

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    """Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def _length_prefix(length: int, offset: int) -> bytes:
    if length < 56:
        return bytes([offset + length])
    encoded_length = length.to_bytes((length.bit_length() + 7) // 8, "big")
    return bytes([offset + 55 + len(encoded_length)]) + encoded_length


def _encode_bytes(data: bytes) -> bytes:
    if len(data) == 1 and data[0] < 0x80:
        return data
    return _length_prefix(len(data), 0x80) + data


def _encode_list(encoded_items: Iterable[bytes]) -> bytes:
    payload = b"".join(encoded_items)
    return _length_prefix(len(payload), 0xC0) + payload


def rlp_encode(item) -> bytes:
    """RLP-encode bytes, non-negative integers and (nested) lists of them."""
    if isinstance(item, int):
        if item < 0:
            raise ValueError("RLP cannot encode negative integers")
        return _encode_bytes(item.to_bytes((item.bit_length() + 7) // 8, "big"))
    if isinstance(item, (bytes, bytearray, memoryview)):
        return _encode_bytes(bytes(item))
    if isinstance(item, (list, tuple)):
        return _encode_list(rlp_encode(element) for element in item)
    raise TypeError(f"cannot RLP-encode {type(item).__name__}")


def log_rlp_hash(logs: Iterable) -> bytes:
    """Keccak hash of the RLP list of logs (address, topics, data)."""
    encoded = [[log.address, list(log.topics), log.data] for log in logs]
    return keccak256(rlp_encode(encoded))


def _nibbles(key: bytes) -> tuple[int, ...]:
    return tuple(n for byte in key for n in (byte >> 4, byte & 0x0F))


def _hex_prefix(nibbles: Sequence[int], leaf: bool) -> bytes:
    flag = 2 if leaf else 0
    if len(nibbles) % 2:
        head = bytes([((flag + 1) << 4) | nibbles[0]])
        rest = nibbles[1:]
    else:
        head = bytes([flag << 4])
        rest = nibbles
    return head + bytes((rest[i] << 4) | rest[i + 1] for i in range(0, len(rest), 2))


def _encode_node(items: list[tuple[tuple[int, ...], bytes]], depth: int) -> bytes:
    if len(items) == 1:
        key, value = items[0]
        return _encode_list([_encode_bytes(_hex_prefix(key[depth:], True)), _encode_bytes(value)])

    common = len(commonprefix([items[0][0], items[-1][0]]))
    if common > depth:
        return _encode_list(
            [
                _encode_bytes(_hex_prefix(items[0][0][depth:common], False)),
                _child_reference(items, common),
            ]
        )

    value = b""
    if len(items[0][0]) == depth:
        value = items[0][1]
        items = items[1:]
    children = [_encode_bytes(b"")] * 16
    for nibble, group in groupby(items, key=lambda item: item[0][depth]):
        children[nibble] = _child_reference(list(group), depth + 1)
    return _encode_list([*children, _encode_bytes(value)])


def _child_reference(items: list[tuple[tuple[int, ...], bytes]], depth: int) -> bytes:
    encoded = _encode_node(items, depth)
    if len(encoded) < 32:
        return encoded
    return _encode_bytes(keccak256(encoded))


def sec_trie_root(entries: Iterable[tuple[bytes, bytes]]) -> bytes:
    """Root of the secure trie whose keys are the Keccak hashes of the given keys."""
    hashed = {keccak256(key): bytes(value) for key, value in entries}
    if not hashed:
        return keccak256(rlp_encode(b""))
    items = sorted((_nibbles(key), value) for key, value in hashed.items())
    return keccak256(_encode_node(items, 0))


@dataclass
class TrieAccount:
    """Account state as it enters the state trie."""

    nonce: int = 0
    balance: int = 0
    code_hash: bytes = field(default_factory=lambda: keccak256(b""))
    storage: dict[int, int] = field(default_factory=dict)


def trie_account_rlp(account: TrieAccount) -> bytes:
    """RLP of [nonce, balance, storage root, code hash]; zero slots are left out."""
    storage_root = sec_trie_root(
        (slot.to_bytes(32, "big"), rlp_encode(value))
        for slot, value in account.storage.items()
        if value != 0
    )
    return rlp_encode([account.nonce, account.balance, storage_root, account.code_hash])


def trie_root(entries: Iterable[tuple[bytes, bytes]]) -> bytes:
    """Secure trie root of (address, account RLP) pairs."""
    return sec_trie_root(entries)


def state_merkle_trie_root(accounts: Iterable[tuple[bytes, TrieAccount]]) -> bytes:
    """State root of the given (address, account) pairs."""
    return trie_root((address, trie_account_rlp(account)) for address, account in accounts)