"""The host interface the interpreter talks to, and a minimal in-memory host."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any

from .gas import Gas
from .instruction_result import InstructionResult
from .merkle_trie import keccak256
from .models import CallInputs, CreateInputs, SelfDestructResult

KECCAK_EMPTY = keccak256(b"")


class UnsupportedOperation(RuntimeError):
    """Raised when a host is asked for an operation it does not provide."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is not supported for this host")
        self.operation = operation


@dataclass
class Log:
    """A log entry emitted by ``address``."""

    address: bytes
    topics: list[bytes] = field(default_factory=list)
    data: bytes = b""

    def __post_init__(self) -> None:
        self.address = bytes(self.address)
        self.topics = [bytes(topic) for topic in self.topics]
        self.data = bytes(self.data)


class Host(abc.ABC):
    """Execution context of the interpreter. Implementations expose ``env``."""

    env: Any

    @abc.abstractmethod
    def step(self, interpreter: Any) -> InstructionResult:
        """Called before each instruction."""

    @abc.abstractmethod
    def step_end(self, interpreter: Any, ret: InstructionResult) -> InstructionResult:
        """Called after each instruction."""

    @abc.abstractmethod
    def load_account(self, address: bytes) -> tuple[bool, bool] | None:
        """Load an account; return (is_cold, is_new_account)."""

    @abc.abstractmethod
    def block_hash(self, number: int) -> bytes | None:
        """Hash of the block with the given number."""

    @abc.abstractmethod
    def balance(self, address: bytes) -> tuple[int, bool] | None:
        """Balance of an account and whether it was cold."""

    @abc.abstractmethod
    def code(self, address: bytes) -> tuple[bytes, bool] | None:
        """Code of an account and whether it was cold."""

    @abc.abstractmethod
    def code_hash(self, address: bytes) -> tuple[bytes, bool] | None:
        """Code hash of an account and whether it was cold."""

    @abc.abstractmethod
    def sload(self, address: bytes, index: int) -> tuple[int, bool] | None:
        """Storage value at ``index`` and whether it was cold."""

    @abc.abstractmethod
    def sstore(
        self, address: bytes, index: int, value: int
    ) -> tuple[int, int, int, bool] | None:
        """Store a value; return (original, present, new, is_cold)."""

    @abc.abstractmethod
    def log(self, address: bytes, topics: list[bytes], data: bytes) -> None:
        """Record a log owned by ``address``."""

    @abc.abstractmethod
    def selfdestruct(self, address: bytes, target: bytes) -> SelfDestructResult | None:
        """Mark ``address`` for deletion, sending its funds to ``target``."""

    @abc.abstractmethod
    def create(
        self, inputs: CreateInputs
    ) -> tuple[InstructionResult, bytes | None, Gas, bytes]:
        """Run a create operation."""

    @abc.abstractmethod
    def call(self, inputs: CallInputs) -> tuple[InstructionResult, Gas, bytes]:
        """Run a call operation."""


class DummyHost(Host):
    """A host with one flat storage map and no accounts, calls or creates.

    Every account looks cold and new, empty and without balance; every block
    hash is zero.
    """

    def __init__(self, env: Any = None) -> None:
        self.env = env
        self.storage: dict[int, int] = {}
        self.logs: list[Log] = []
        self.account_is_cold = True
        self.account_is_new = True
        self.account_balance = 0
        self.account_code = b""
        self.block_hash_value = bytes(32)

    def clear(self) -> None:
        """Forget all storage and logs."""
        self.storage.clear()
        self.logs.clear()

    def step(self, interpreter: Any) -> InstructionResult:
        return InstructionResult.CONTINUE

    def step_end(self, interpreter: Any, ret: InstructionResult) -> InstructionResult:
        return InstructionResult.CONTINUE

    def load_account(self, address: bytes) -> tuple[bool, bool]:
        return self.account_is_cold, self.account_is_new

    def block_hash(self, number: int) -> bytes:
        return bytes(self.block_hash_value)

    def balance(self, address: bytes) -> tuple[int, bool]:
        return self.account_balance, False

    def code(self, address: bytes) -> tuple[bytes, bool]:
        return bytes(self.account_code), False

    def code_hash(self, address: bytes) -> tuple[bytes, bool]:
        return KECCAK_EMPTY, False

    def sload(self, address: bytes, index: int) -> tuple[int, bool]:
        if index in self.storage:
            return self.storage[index], False
        self.storage[index] = 0
        return 0, True

    def sstore(self, address: bytes, index: int, value: int) -> tuple[int, int, int, bool]:
        if index in self.storage:
            present, is_cold = self.storage[index], False
        else:
            present, is_cold = 0, True
        self.storage[index] = value
        return 0, present, value, is_cold

    def log(self, address: bytes, topics: list[bytes], data: bytes) -> None:
        self.logs.append(Log(address, list(topics), data))

    def selfdestruct(self, address: bytes, target: bytes) -> SelfDestructResult:
        raise UnsupportedOperation(type(self)._operation_name("selfdestruct"))

    def create(self, inputs: CreateInputs) -> tuple[InstructionResult, bytes | None, Gas, bytes]:
        raise UnsupportedOperation(type(self)._operation_name("create"))

    def call(self, inputs: CallInputs) -> tuple[InstructionResult, Gas, bytes]:
        raise UnsupportedOperation(type(self)._operation_name("call"))

    @staticmethod
    def _operation_name(method: str) -> str:
        return method.capitalize()