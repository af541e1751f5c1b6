import pytest

from evmcore.host import DummyHost, Host, Log
from evmcore.instruction_result import InstructionResult
from evmcore.merkle_trie import keccak256
from evmcore.models import CallInputs, CreateInputs, CreateScheme, Transfer

ADDR = bytes(range(20))
OTHER = bytes(20)


def test_host_is_abstract():
    with pytest.raises(TypeError):
        Host()


def test_step_hooks_continue():
    host = DummyHost()
    assert host.step(None) is InstructionResult.CONTINUE
    assert host.step_end(None, InstructionResult.STOP) is InstructionResult.CONTINUE


def test_env_is_kept():
    env = {"chain_id": 1}
    assert DummyHost(env).env is env


def test_account_queries():
    host = DummyHost()
    assert host.load_account(ADDR) == (True, True)
    assert host.block_hash(5) == bytes(32)
    assert host.balance(ADDR) == (0, False)
    assert host.code(ADDR) == (b"", False)
    assert host.code_hash(ADDR) == (keccak256(b""), False)


def test_sload_is_cold_then_warm():
    host = DummyHost()
    assert host.sload(ADDR, 7) == (0, True)
    assert host.sload(ADDR, 7) == (0, False)
    assert host.storage == {7: 0}


def test_sstore_reports_present_value():
    host = DummyHost()
    assert host.sstore(ADDR, 1, 42) == (0, 0, 42, True)
    assert host.sstore(ADDR, 1, 43) == (0, 42, 43, False)
    assert host.sload(ADDR, 1) == (43, False)


def test_log_and_clear():
    host = DummyHost()
    host.log(ADDR, [bytes(32)], b"\x01\x02")
    host.sstore(ADDR, 1, 2)
    assert host.logs == [Log(ADDR, [bytes(32)], b"\x01\x02")]
    host.clear()
    assert host.logs == []
    assert host.storage == {}


def test_selfdestruct_unsupported():
    with pytest.raises(RuntimeError, match="Selfdestruct"):
        DummyHost().selfdestruct(ADDR, OTHER)


def test_create_unsupported():
    inputs = CreateInputs(
        caller=ADDR, scheme=CreateScheme.create(), value=0, init_code=b"", gas_limit=0
    )
    with pytest.raises(RuntimeError, match="Create"):
        DummyHost().create(inputs)


def test_call_unsupported():
    inputs = CallInputs(
        contract=ADDR,
        transfer=Transfer(source=OTHER, target=ADDR, value=0),
        input=b"",
        gas_limit=0,
    )
    with pytest.raises(RuntimeError, match="Call"):
        DummyHost().call(inputs)