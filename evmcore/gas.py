"""Gas accounting and the gas cost schedule."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .constants import (
    ACCESS_LIST_ADDRESS,
    ACCESS_LIST_STORAGE_KEY,
    CALL_STIPEND,
    CALLVALUE,
    COLD_ACCOUNT_ACCESS_COST,
    COLD_SLOAD_COST,
    COPY,
    CREATE,
    EXP,
    INITCODE_WORD_COST,
    LOG,
    LOGDATA,
    LOGTOPIC,
    MEMORY,
    NEWACCOUNT,
    REFUND_SSTORE_CLEARS,
    SHA3,
    SHA3WORD,
    SSTORE_RESET,
    SSTORE_SET,
    TRANSACTION_NON_ZERO_DATA_FRONTIER,
    TRANSACTION_NON_ZERO_DATA_INIT,
    TRANSACTION_ZERO_DATA,
    VERYLOW,
    WARM_STORAGE_READ_COST,
)
from .models import SelfDestructResult
from .spec import SpecId

U64_MAX = (1 << 64) - 1


def _checked(value: int) -> int | None:
    """Return ``value`` if it fits in 64 bits, otherwise None."""
    return value if value <= U64_MAX else None


def _words(length: int) -> int:
    return (length + 31) // 32


class Gas:
    """Gas budget of a call frame: limit, spent, memory and refund."""

    __slots__ = ("_limit", "_all_used_gas", "_used", "_memory", "_refunded")

    def __init__(self, limit: int) -> None:
        self._limit = limit
        self._all_used_gas = 0
        self._used = 0
        self._memory = 0
        self._refunded = 0

    def __repr__(self) -> str:
        return (
            f"Gas(limit={self._limit}, spend={self._all_used_gas}, "
            f"memory={self._memory}, refunded={self._refunded})"
        )

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def memory(self) -> int:
        """Gas charged for memory expansion so far."""
        return self._memory

    @property
    def used(self) -> int:
        """Gas spent, not counting memory expansion."""
        return self._used

    @property
    def refunded(self) -> int:
        return self._refunded

    @property
    def spend(self) -> int:
        """Gas spent, memory expansion included."""
        return self._all_used_gas

    @property
    def remaining(self) -> int:
        return self._limit - self._all_used_gas

    def erase_cost(self, returned: int) -> None:
        """Give back gas that was recorded but not consumed."""
        if returned > self._used:
            raise ValueError("cannot return more gas than was used")
        self._used -= returned
        self._all_used_gas -= returned

    def record_refund(self, refund: int) -> None:
        """Add to the refund counter; ``refund`` may be negative."""
        self._refunded += refund

    def record_cost(self, cost: int) -> bool:
        """Charge ``cost``; return False and change nothing if it does not fit."""
        all_used_gas = self._all_used_gas + cost
        if all_used_gas > U64_MAX or self._limit < all_used_gas:
            return False
        self._used += cost
        self._all_used_gas = all_used_gas
        return True

    def record_memory(self, gas_memory: int) -> bool:
        """Raise the memory expansion charge to ``gas_memory`` if that fits."""
        if gas_memory > self._memory:
            all_used_gas = self._used + gas_memory
            if all_used_gas > U64_MAX or self._limit < all_used_gas:
                return False
            self._memory = gas_memory
            self._all_used_gas = all_used_gas
        return True


def sstore_refund(spec: SpecId, original: int, current: int, new: int) -> int:
    """Refund earned by an SSTORE, which may be negative."""
    if not spec.enabled(SpecId.ISTANBUL):
        return REFUND_SSTORE_CLEARS if current != 0 and new == 0 else 0

    if spec.enabled(SpecId.LONDON):
        # EIP-3529: reduction in refunds
        clears_schedule = SSTORE_RESET - COLD_SLOAD_COST + ACCESS_LIST_STORAGE_KEY
    else:
        clears_schedule = REFUND_SSTORE_CLEARS

    if current == new:
        return 0
    if original == current and new == 0:
        return clears_schedule

    refund = 0
    if original != 0:
        if current == 0:
            refund -= clears_schedule
        elif new == 0:
            refund += clears_schedule

    if original == new:
        if spec.enabled(SpecId.BERLIN):
            sstore_reset, sload = SSTORE_RESET - COLD_SLOAD_COST, WARM_STORAGE_READ_COST
        else:
            sstore_reset, sload = SSTORE_RESET, sload_cost(spec, False)
        if original == 0:
            refund += SSTORE_SET - sload
        else:
            refund += sstore_reset - sload
    return refund


def create2_cost(length: int) -> int | None:
    """Cost of CREATE2 with ``length`` bytes of init code to hash."""
    return _checked(CREATE + SHA3WORD * _words(length))


def _log2floor(value: int) -> int:
    if value <= 0:
        raise ValueError("log2floor needs a positive value")
    return value.bit_length() - 1


def exp_cost(spec: SpecId, power: int) -> int | None:
    """Cost of EXP with the given exponent."""
    if power == 0:
        return EXP
    # EIP-160: EXP cost increase
    gas_byte = 50 if spec.enabled(SpecId.SPURIOUS_DRAGON) else 10
    return _checked(EXP + gas_byte * (_log2floor(power) // 8 + 1))


def verylowcopy_cost(length: int) -> int | None:
    return _checked(VERYLOW + COPY * _words(length))


def extcodecopy_cost(spec: SpecId, length: int, is_cold: bool) -> int | None:
    if spec.enabled(SpecId.BERLIN):
        base_gas = COLD_ACCOUNT_ACCESS_COST if is_cold else WARM_STORAGE_READ_COST
    elif spec.enabled(SpecId.TANGERINE):
        base_gas = 700
    else:
        base_gas = 20
    return _checked(base_gas + COPY * _words(length))


def account_access_gas(spec: SpecId, is_cold: bool) -> int:
    if spec.enabled(SpecId.BERLIN):
        return COLD_ACCOUNT_ACCESS_COST if is_cold else WARM_STORAGE_READ_COST
    if spec.enabled(SpecId.ISTANBUL):
        return 700
    return 20


def log_cost(n: int, length: int) -> int | None:
    """Cost of a LOG with ``n`` topics and ``length`` bytes of data."""
    return _checked(LOG + LOGDATA * length + LOGTOPIC * n)


def sha3_cost(length: int) -> int | None:
    return _checked(SHA3 + SHA3WORD * _words(length))


def initcode_cost(length: int) -> int:
    """EIP-3860: two gas for every 32-byte chunk of init code."""
    return INITCODE_WORD_COST * _words(length)


def sload_cost(spec: SpecId, is_cold: bool) -> int:
    if spec.enabled(SpecId.BERLIN):
        return COLD_SLOAD_COST if is_cold else WARM_STORAGE_READ_COST
    if spec.enabled(SpecId.ISTANBUL):
        # EIP-1884: repricing for trie-size-dependent opcodes
        return 800
    if spec.enabled(SpecId.TANGERINE):
        # EIP-150: gas cost changes for IO-heavy operations
        return 200
    return 50


def sstore_cost(
    spec: SpecId, original: int, current: int, new: int, gas: int, is_cold: bool
) -> int | None:
    """Cost of an SSTORE, or None when too little gas remains to attempt it."""
    if spec.enabled(SpecId.BERLIN):
        gas_sload, gas_sstore_reset = WARM_STORAGE_READ_COST, SSTORE_RESET - COLD_SLOAD_COST
    else:
        gas_sload, gas_sstore_reset = sload_cost(spec, is_cold), SSTORE_RESET

    if spec.enabled(SpecId.ISTANBUL):
        # EIP-2200 (EIP-1283 with the EIP-1706 stipend guard)
        if gas <= CALL_STIPEND:
            return None
        if new == current:
            gas_cost = gas_sload
        elif original == current:
            gas_cost = SSTORE_SET if original == 0 else gas_sstore_reset
        else:
            gas_cost = gas_sload
    elif current == 0 and new != 0:
        gas_cost = SSTORE_SET
    else:
        gas_cost = gas_sstore_reset

    # EIP-2929: slots not yet touched in this transaction cost extra
    if spec.enabled(SpecId.BERLIN) and is_cold:
        return gas_cost + COLD_SLOAD_COST
    return gas_cost


def selfdestruct_cost(spec: SpecId, res: SelfDestructResult) -> int:
    # EIP-161: state trie clearing
    if spec.enabled(SpecId.SPURIOUS_DRAGON):
        charge_topup = res.had_value and not res.target_exists
    else:
        charge_topup = not res.target_exists

    tangerine = spec.enabled(SpecId.TANGERINE)
    gas = (5000 if tangerine else 0) + (25000 if tangerine and charge_topup else 0)
    if spec.enabled(SpecId.BERLIN) and res.is_cold:
        gas += COLD_ACCOUNT_ACCESS_COST
    return gas


def call_cost(
    spec: SpecId,
    value: int,
    is_new: bool,
    is_cold: bool,
    is_call_or_callcode: bool,
    is_call_or_staticcall: bool,
) -> int:
    transfers_value = value != 0

    if spec.enabled(SpecId.BERLIN):
        call_gas = COLD_ACCOUNT_ACCESS_COST if is_cold else WARM_STORAGE_READ_COST
    elif spec.enabled(SpecId.TANGERINE):
        call_gas = 700
    else:
        call_gas = 40

    return (
        call_gas
        + _xfer_cost(is_call_or_callcode, transfers_value)
        + _new_cost(spec, is_call_or_staticcall, is_new, transfers_value)
    )


def hot_cold_cost(spec: SpecId, is_cold: bool, regular_value: int) -> int:
    if spec.enabled(SpecId.BERLIN):
        return COLD_ACCOUNT_ACCESS_COST if is_cold else WARM_STORAGE_READ_COST
    return regular_value


def _xfer_cost(is_call_or_callcode: bool, transfers_value: bool) -> int:
    return CALLVALUE if is_call_or_callcode and transfers_value else 0


def _new_cost(
    spec: SpecId, is_call_or_staticcall: bool, is_new: bool, transfers_value: bool
) -> int:
    if not is_call_or_staticcall:
        return 0
    # EIP-161: state trie clearing
    if spec.enabled(SpecId.SPURIOUS_DRAGON):
        return NEWACCOUNT if transfers_value and is_new else 0
    return NEWACCOUNT if is_new else 0


def memory_gas(a: int) -> int:
    """Total gas for ``a`` words of memory, saturating at the 64-bit maximum."""
    linear = min(MEMORY * a, U64_MAX)
    quadratic = min(a * a, U64_MAX) // 512
    return min(linear + quadratic, U64_MAX)


def initial_tx_gas(
    spec: SpecId,
    data: bytes,
    is_create: bool,
    access_list: Iterable[tuple[bytes, Sequence[int]]],
) -> int:
    """Intrinsic gas a transaction pays before any code runs."""
    zero_len = data.count(0)
    non_zero_len = len(data) - zero_len

    initial_gas = zero_len * TRANSACTION_ZERO_DATA
    # EIP-2028: transaction data gas cost reduction
    if spec.enabled(SpecId.ISTANBUL):
        initial_gas += non_zero_len * TRANSACTION_NON_ZERO_DATA_INIT
    else:
        initial_gas += non_zero_len * TRANSACTION_NON_ZERO_DATA_FRONTIER

    if spec.enabled(SpecId.BERLIN):
        entries = list(access_list)
        slots = sum(len(keys) for _, keys in entries)
        initial_gas += len(entries) * ACCESS_LIST_ADDRESS
        initial_gas += slots * ACCESS_LIST_STORAGE_KEY

    # EIP-2: contract creation costs more from Homestead on
    initial_gas += 53000 if is_create and spec.enabled(SpecId.HOMESTEAD) else 21000

    # EIP-3860: initcode analysis stipend
    if spec.enabled(SpecId.SHANGHAI) and is_create:
        initial_gas += initcode_cost(len(data))

    return initial_gas