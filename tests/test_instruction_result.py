import pytest

from evmcore.instruction_result import (
    Eval,
    Halt,
    InstructionResult,
    OutOfGasError,
    SuccessOrHalt,
    is_return_ok,
    is_return_revert,
)


def test_codes_from_source():
    assert SuccessOrHalt.from_instruction_result(InstructionResult(0x00)).is_internal_continue()
    assert SuccessOrHalt.from_instruction_result(InstructionResult(0x20)).is_revert()
    assert SuccessOrHalt.from_instruction_result(
        InstructionResult(0x50)
    ).to_halt() is Halt.from_out_of_gas(OutOfGasError.BASIC_OUT_OF_GAS)
    assert SuccessOrHalt.from_instruction_result(
        InstructionResult(0x54)
    ).to_halt() is Halt.from_out_of_gas(OutOfGasError.INVALID_OPERAND)


@pytest.mark.parametrize(
    "result, expected",
    [
        (InstructionResult.STOP, Eval.STOP),
        (InstructionResult.RETURN, Eval.RETURN),
        (InstructionResult.SELF_DESTRUCT, Eval.SELF_DESTRUCT),
    ],
)
def test_success_results(result, expected):
    outcome = SuccessOrHalt.from_instruction_result(result)
    assert outcome.is_success()
    assert outcome.to_success() is expected
    assert outcome.to_halt() is None


def test_continue_is_internal():
    outcome = SuccessOrHalt.from_instruction_result(InstructionResult.CONTINUE)
    assert outcome.is_internal_continue()
    assert not outcome.is_success()
    assert not outcome.is_halt()
    assert not outcome.is_revert()


def test_revert():
    outcome = SuccessOrHalt.from_instruction_result(InstructionResult.REVERT)
    assert outcome.is_revert()
    assert outcome.to_success() is None
    assert outcome.to_halt() is None


@pytest.mark.parametrize(
    "result, error",
    [
        (InstructionResult.OUT_OF_GAS, OutOfGasError.BASIC_OUT_OF_GAS),
        (InstructionResult.MEMORY_OOG, OutOfGasError.MEMORY),
        (InstructionResult.MEMORY_LIMIT_OOG, OutOfGasError.MEMORY_LIMIT),
        (InstructionResult.PRECOMPILE_OOG, OutOfGasError.PRECOMPILE),
        (InstructionResult.INVALID_OPERAND_OOG, OutOfGasError.INVALID_OPERAND),
    ],
)
def test_out_of_gas_halts(result, error):
    halt = SuccessOrHalt.from_instruction_result(result).to_halt()
    assert halt is Halt.from_out_of_gas(error)
    assert halt.out_of_gas_error is error


def test_starting_with_ef_maps_to_size_limit():
    outcome = SuccessOrHalt.from_instruction_result(
        InstructionResult.CREATE_CONTRACT_STARTING_WITH_EF
    )
    assert outcome.to_halt() is Halt.CREATE_CONTRACT_SIZE_LIMIT
    assert Halt.CREATE_CONTRACT_SIZE_LIMIT.out_of_gas_error is None


def test_call_too_deep_and_out_of_fund_halt():
    assert (
        SuccessOrHalt.from_instruction_result(InstructionResult.CALL_TOO_DEEP).to_halt()
        is Halt.CALL_TOO_DEEP
    )
    assert (
        SuccessOrHalt.from_instruction_result(InstructionResult.OUT_OF_FUND).to_halt()
        is Halt.OUT_OF_FUND
    )


def test_fatal_external_error():
    outcome = SuccessOrHalt.from_instruction_result(InstructionResult.FATAL_EXTERNAL_ERROR)
    assert outcome.is_fatal_external_error()
    assert not outcome.is_halt()


@pytest.mark.parametrize("result", list(InstructionResult))
def test_every_result_has_exactly_one_class(result):
    outcome = SuccessOrHalt.from_instruction_result(result)
    flags = [
        outcome.is_success(),
        outcome.is_revert(),
        outcome.is_halt(),
        outcome.is_fatal_external_error(),
        outcome.is_internal_continue(),
    ]
    assert flags.count(True) == 1


def test_return_ok_and_revert_groups():
    ok = {r for r in InstructionResult if is_return_ok(r)}
    revert = {r for r in InstructionResult if is_return_revert(r)}
    assert ok == {
        InstructionResult.CONTINUE,
        InstructionResult.STOP,
        InstructionResult.RETURN,
        InstructionResult.SELF_DESTRUCT,
    }
    assert revert == {
        InstructionResult.REVERT,
        InstructionResult.CALL_TOO_DEEP,
        InstructionResult.OUT_OF_FUND,
    }