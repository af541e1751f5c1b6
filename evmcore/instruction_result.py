"""Outcome codes of instruction execution and their classification."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class InstructionResult(enum.IntEnum):
    """Status left by an instruction once it has run."""

    # success codes
    CONTINUE = 0x00
    STOP = 0x01
    RETURN = 0x02
    SELF_DESTRUCT = 0x03

    # revert codes
    REVERT = 0x20
    CALL_TOO_DEEP = 0x21
    OUT_OF_FUND = 0x22

    # error codes
    OUT_OF_GAS = 0x50
    MEMORY_OOG = 0x51
    MEMORY_LIMIT_OOG = 0x52
    PRECOMPILE_OOG = 0x53
    INVALID_OPERAND_OOG = 0x54
    OPCODE_NOT_FOUND = 0x55
    CALL_NOT_ALLOWED_INSIDE_STATIC = 0x56
    STATE_CHANGE_DURING_STATIC_CALL = 0x57
    INVALID_FE_OPCODE = 0x58
    INVALID_JUMP = 0x59
    NOT_ACTIVATED = 0x5A
    STACK_UNDERFLOW = 0x5B
    STACK_OVERFLOW = 0x5C
    OUT_OF_OFFSET = 0x5D
    CREATE_COLLISION = 0x5E
    OVERFLOW_PAYMENT = 0x5F
    PRECOMPILE_ERROR = 0x60
    NONCE_OVERFLOW = 0x61
    CREATE_CONTRACT_SIZE_LIMIT = 0x62
    CREATE_CONTRACT_STARTING_WITH_EF = 0x63
    CREATE_INITCODE_SIZE_LIMIT = 0x64

    # fatal error reported by the database
    FATAL_EXTERNAL_ERROR = 0x65


class Eval(enum.Enum):
    """Ways a call can finish successfully."""

    STOP = "Stop"
    RETURN = "Return"
    SELF_DESTRUCT = "SelfDestruct"


class OutOfGasError(enum.Enum):
    """Which kind of gas exhaustion halted execution."""

    BASIC_OUT_OF_GAS = "BasicOutOfGas"
    MEMORY_LIMIT = "MemoryLimit"
    MEMORY = "Memory"
    PRECOMPILE = "Precompile"
    INVALID_OPERAND = "InvalidOperand"


class Halt(enum.Enum):
    """Reasons for an exceptional halt."""

    OUT_OF_GAS_BASIC = "OutOfGas(BasicOutOfGas)"
    OUT_OF_GAS_MEMORY_LIMIT = "OutOfGas(MemoryLimit)"
    OUT_OF_GAS_MEMORY = "OutOfGas(Memory)"
    OUT_OF_GAS_PRECOMPILE = "OutOfGas(Precompile)"
    OUT_OF_GAS_INVALID_OPERAND = "OutOfGas(InvalidOperand)"
    OPCODE_NOT_FOUND = "OpcodeNotFound"
    INVALID_FE_OPCODE = "InvalidFEOpcode"
    INVALID_JUMP = "InvalidJump"
    NOT_ACTIVATED = "NotActivated"
    STACK_UNDERFLOW = "StackUnderflow"
    STACK_OVERFLOW = "StackOverflow"
    OUT_OF_OFFSET = "OutOfOffset"
    CREATE_COLLISION = "CreateCollision"
    PRECOMPILE_ERROR = "PrecompileError"
    NONCE_OVERFLOW = "NonceOverflow"
    CREATE_CONTRACT_SIZE_LIMIT = "CreateContractSizeLimit"
    CREATE_INITCODE_SIZE_LIMIT = "CreateInitcodeSizeLimit"
    OVERFLOW_PAYMENT = "OverflowPayment"
    STATE_CHANGE_DURING_STATIC_CALL = "StateChangeDuringStaticCall"
    CALL_NOT_ALLOWED_INSIDE_STATIC = "CallNotAllowedInsideStatic"
    OUT_OF_FUND = "OutOfFund"
    CALL_TOO_DEEP = "CallTooDeep"

    @classmethod
    def from_out_of_gas(cls, error: OutOfGasError) -> Halt:
        """Return the halt reason for a kind of gas exhaustion."""
        return _OOG_TO_HALT[error]

    @property
    def out_of_gas_error(self) -> OutOfGasError | None:
        """The kind of gas exhaustion, or None for other halts."""
        return _HALT_TO_OOG.get(self)


_OOG_TO_HALT = {
    OutOfGasError.BASIC_OUT_OF_GAS: Halt.OUT_OF_GAS_BASIC,
    OutOfGasError.MEMORY_LIMIT: Halt.OUT_OF_GAS_MEMORY_LIMIT,
    OutOfGasError.MEMORY: Halt.OUT_OF_GAS_MEMORY,
    OutOfGasError.PRECOMPILE: Halt.OUT_OF_GAS_PRECOMPILE,
    OutOfGasError.INVALID_OPERAND: Halt.OUT_OF_GAS_INVALID_OPERAND,
}
_HALT_TO_OOG = {halt: error for error, halt in _OOG_TO_HALT.items()}


class _Outcome(enum.Enum):
    SUCCESS = "Success"
    REVERT = "Revert"
    HALT = "Halt"
    FATAL_EXTERNAL_ERROR = "FatalExternalError"
    INTERNAL_CONTINUE = "InternalContinue"


@dataclass(frozen=True)
class SuccessOrHalt:
    """How a finished execution is classified."""

    outcome: _Outcome
    eval_result: Eval | None = None
    halt_reason: Halt | None = None

    @classmethod
    def success(cls, result: Eval) -> SuccessOrHalt:
        return cls(_Outcome.SUCCESS, eval_result=result)

    @classmethod
    def revert(cls) -> SuccessOrHalt:
        return cls(_Outcome.REVERT)

    @classmethod
    def halted(cls, reason: Halt) -> SuccessOrHalt:
        return cls(_Outcome.HALT, halt_reason=reason)

    @classmethod
    def fatal_external_error(cls) -> SuccessOrHalt:
        return cls(_Outcome.FATAL_EXTERNAL_ERROR)

    @classmethod
    def internal_continue(cls) -> SuccessOrHalt:
        return cls(_Outcome.INTERNAL_CONTINUE)

    @classmethod
    def from_instruction_result(cls, result: InstructionResult) -> SuccessOrHalt:
        """Classify an instruction result."""
        return _CLASSIFICATION[InstructionResult(result)]

    def is_success(self) -> bool:
        """True if execution finished without revert or halt."""
        return self.outcome is _Outcome.SUCCESS

    def to_success(self) -> Eval | None:
        return self.eval_result if self.is_success() else None

    def is_revert(self) -> bool:
        return self.outcome is _Outcome.REVERT

    def is_halt(self) -> bool:
        """True if execution stopped with an exceptional halt."""
        return self.outcome is _Outcome.HALT

    def to_halt(self) -> Halt | None:
        return self.halt_reason if self.is_halt() else None

    def is_fatal_external_error(self) -> bool:
        return self.outcome is _Outcome.FATAL_EXTERNAL_ERROR

    def is_internal_continue(self) -> bool:
        return self.outcome is _Outcome.INTERNAL_CONTINUE


_R = InstructionResult
_CLASSIFICATION = {
    _R.CONTINUE: SuccessOrHalt.internal_continue(),
    _R.STOP: SuccessOrHalt.success(Eval.STOP),
    _R.RETURN: SuccessOrHalt.success(Eval.RETURN),
    _R.SELF_DESTRUCT: SuccessOrHalt.success(Eval.SELF_DESTRUCT),
    _R.REVERT: SuccessOrHalt.revert(),
    _R.CALL_TOO_DEEP: SuccessOrHalt.halted(Halt.CALL_TOO_DEEP),
    _R.OUT_OF_FUND: SuccessOrHalt.halted(Halt.OUT_OF_FUND),
    _R.OUT_OF_GAS: SuccessOrHalt.halted(Halt.OUT_OF_GAS_BASIC),
    _R.MEMORY_LIMIT_OOG: SuccessOrHalt.halted(Halt.OUT_OF_GAS_MEMORY_LIMIT),
    _R.MEMORY_OOG: SuccessOrHalt.halted(Halt.OUT_OF_GAS_MEMORY),
    _R.PRECOMPILE_OOG: SuccessOrHalt.halted(Halt.OUT_OF_GAS_PRECOMPILE),
    _R.INVALID_OPERAND_OOG: SuccessOrHalt.halted(Halt.OUT_OF_GAS_INVALID_OPERAND),
    _R.OPCODE_NOT_FOUND: SuccessOrHalt.halted(Halt.OPCODE_NOT_FOUND),
    _R.CALL_NOT_ALLOWED_INSIDE_STATIC: SuccessOrHalt.halted(
        Halt.CALL_NOT_ALLOWED_INSIDE_STATIC
    ),
    _R.STATE_CHANGE_DURING_STATIC_CALL: SuccessOrHalt.halted(
        Halt.STATE_CHANGE_DURING_STATIC_CALL
    ),
    _R.INVALID_FE_OPCODE: SuccessOrHalt.halted(Halt.INVALID_FE_OPCODE),
    _R.INVALID_JUMP: SuccessOrHalt.halted(Halt.INVALID_JUMP),
    _R.NOT_ACTIVATED: SuccessOrHalt.halted(Halt.NOT_ACTIVATED),
    _R.STACK_UNDERFLOW: SuccessOrHalt.halted(Halt.STACK_UNDERFLOW),
    _R.STACK_OVERFLOW: SuccessOrHalt.halted(Halt.STACK_OVERFLOW),
    _R.OUT_OF_OFFSET: SuccessOrHalt.halted(Halt.OUT_OF_OFFSET),
    _R.CREATE_COLLISION: SuccessOrHalt.halted(Halt.CREATE_COLLISION),
    _R.OVERFLOW_PAYMENT: SuccessOrHalt.halted(Halt.OVERFLOW_PAYMENT),
    _R.PRECOMPILE_ERROR: SuccessOrHalt.halted(Halt.PRECOMPILE_ERROR),
    _R.NONCE_OVERFLOW: SuccessOrHalt.halted(Halt.NONCE_OVERFLOW),
    _R.CREATE_CONTRACT_SIZE_LIMIT: SuccessOrHalt.halted(Halt.CREATE_CONTRACT_SIZE_LIMIT),
    _R.CREATE_CONTRACT_STARTING_WITH_EF: SuccessOrHalt.halted(
        Halt.CREATE_CONTRACT_SIZE_LIMIT
    ),
    _R.CREATE_INITCODE_SIZE_LIMIT: SuccessOrHalt.halted(Halt.CREATE_INITCODE_SIZE_LIMIT),
    _R.FATAL_EXTERNAL_ERROR: SuccessOrHalt.fatal_external_error(),
}

_RETURN_OK = frozenset({_R.CONTINUE, _R.STOP, _R.RETURN, _R.SELF_DESTRUCT})
_RETURN_REVERT = frozenset({_R.REVERT, _R.CALL_TOO_DEEP, _R.OUT_OF_FUND})


def is_return_ok(result: InstructionResult) -> bool:
    """True for results that continue or end execution successfully."""
    return result in _RETURN_OK


def is_return_revert(result: InstructionResult) -> bool:
    """True for results that revert the state changes of a call."""
    return result in _RETURN_REVERT