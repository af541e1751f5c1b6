"""Inputs and results exchanged between the interpreter and its host."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

ADDRESS_LENGTH = 20
ZERO_ADDRESS = bytes(ADDRESS_LENGTH)
U256_MAX = (1 << 256) - 1
U64_MAX = (1 << 64) - 1


def _address(name: str, value) -> bytes:
    if not isinstance(value, (bytes, bytearray)) or len(value) != ADDRESS_LENGTH:
        raise ValueError(f"{name} must be {ADDRESS_LENGTH} bytes")
    return bytes(value)


def _u256(name: str, value: int) -> int:
    if not 0 <= value <= U256_MAX:
        raise ValueError(f"{name} is out of the 256-bit range")
    return value


def _u64(name: str, value: int) -> int:
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} is out of the 64-bit range")
    return value


class CallScheme(enum.Enum):
    """The opcode family a call was made with."""

    CALL = "CALL"
    CALL_CODE = "CALLCODE"
    DELEGATE_CALL = "DELEGATECALL"
    STATIC_CALL = "STATICCALL"


@dataclass(frozen=True)
class CreateScheme:
    """CREATE when ``salt`` is None, otherwise CREATE2 with that salt."""

    salt: int | None = None

    def __post_init__(self) -> None:
        if self.salt is not None:
            _u256("salt", self.salt)

    @classmethod
    def create(cls) -> CreateScheme:
        return cls()

    @classmethod
    def create2(cls, salt: int) -> CreateScheme:
        return cls(salt)

    @property
    def is_create2(self) -> bool:
        return self.salt is not None


@dataclass
class CallContext:
    """Addresses and value seen by the code running in a call frame."""

    address: bytes = ZERO_ADDRESS
    caller: bytes = ZERO_ADDRESS
    code_address: bytes = ZERO_ADDRESS
    apparent_value: int = 0
    scheme: CallScheme = CallScheme.CALL

    def __post_init__(self) -> None:
        self.address = _address("address", self.address)
        self.caller = _address("caller", self.caller)
        self.code_address = _address("code_address", self.code_address)
        _u256("apparent_value", self.apparent_value)


@dataclass
class Transfer:
    """A value transfer from ``source`` to ``target``."""

    source: bytes
    target: bytes
    value: int

    def __post_init__(self) -> None:
        self.source = _address("source", self.source)
        self.target = _address("target", self.target)
        _u256("value", self.value)


@dataclass
class CallInputs:
    """Everything a host needs to perform a call."""

    contract: bytes
    transfer: Transfer
    input: bytes
    gas_limit: int
    context: CallContext = field(default_factory=CallContext)
    is_static: bool = False

    def __post_init__(self) -> None:
        self.contract = _address("contract", self.contract)
        self.input = bytes(self.input)
        _u64("gas_limit", self.gas_limit)


@dataclass
class CreateInputs:
    """Everything a host needs to create a contract."""

    caller: bytes
    scheme: CreateScheme
    value: int
    init_code: bytes
    gas_limit: int

    def __post_init__(self) -> None:
        self.caller = _address("caller", self.caller)
        self.init_code = bytes(self.init_code)
        _u256("value", self.value)
        _u64("gas_limit", self.gas_limit)


@dataclass
class SelfDestructResult:
    """What a host reports back after marking an account for destruction."""

    had_value: bool = False
    target_exists: bool = False
    is_cold: bool = False
    previously_destroyed: bool = False