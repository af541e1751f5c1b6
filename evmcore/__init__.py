"""EVM gas schedule, call models, instruction results, a host interface and state-test helpers."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "deserializer",
    "gas",
    "host",
    "instruction_result",
    "merkle_trie",
    "models",
    "spec",
]