import pytest

from evmcore.models import (
    ZERO_ADDRESS,
    CallContext,
    CallInputs,
    CallScheme,
    CreateInputs,
    CreateScheme,
    SelfDestructResult,
    Transfer,
)

ALICE = bytes(19) + b"\x01"
BOB = bytes(19) + b"\x02"


def test_call_context_defaults():
    ctx = CallContext()
    assert ctx.address == ZERO_ADDRESS
    assert ctx.caller == bytes(20)
    assert ctx.apparent_value == 0
    assert ctx.scheme is CallScheme.CALL
    assert ctx == CallContext()


def test_call_context_equality_depends_on_scheme():
    assert CallContext(scheme=CallScheme.STATIC_CALL) != CallContext()
    assert CallContext(scheme=CallScheme.STATIC_CALL) == CallContext(
        scheme=CallScheme.STATIC_CALL
    )


def test_call_context_rejects_short_address():
    with pytest.raises(ValueError):
        CallContext(address=b"\x01")


def test_bytearray_address_is_normalised():
    ctx = CallContext(caller=bytearray(ALICE))
    assert ctx.caller == ALICE
    assert isinstance(ctx.caller, bytes)


def test_transfer_rejects_negative_value():
    with pytest.raises(ValueError):
        Transfer(ALICE, BOB, -1)


def test_transfer_rejects_value_over_256_bits():
    with pytest.raises(ValueError):
        Transfer(ALICE, BOB, 1 << 256)


def test_create_scheme_kinds():
    assert not CreateScheme.create().is_create2
    scheme = CreateScheme.create2(5)
    assert scheme.is_create2
    assert scheme.salt == 5
    assert scheme == CreateScheme(salt=5)


def test_create_scheme_rejects_large_salt():
    with pytest.raises(ValueError):
        CreateScheme.create2(1 << 256)


def test_call_inputs_keeps_fields():
    transfer = Transfer(ALICE, BOB, 3)
    inputs = CallInputs(BOB, transfer, bytearray(b"\xaa"), 1000)
    assert inputs.input == b"\xaa"
    assert inputs.transfer.value == 3
    assert inputs.context == CallContext()
    assert inputs.is_static is False


def test_call_inputs_rejects_gas_over_64_bits():
    with pytest.raises(ValueError):
        CallInputs(BOB, Transfer(ALICE, BOB, 0), b"", 1 << 64)


def test_create_inputs_validation():
    inputs = CreateInputs(ALICE, CreateScheme.create(), 0, b"\x60\x00", 100)
    assert inputs.init_code == b"\x60\x00"
    with pytest.raises(ValueError):
        CreateInputs(b"", CreateScheme.create(), 0, b"", 100)


def test_self_destruct_result_defaults():
    res = SelfDestructResult()
    assert (res.had_value, res.target_exists, res.is_cold, res.previously_destroyed) == (
        False,
        False,
        False,
        False,
    )