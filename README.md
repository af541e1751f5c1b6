# evmcore

Building blocks for an Ethereum Virtual Machine and for checking the results
of Ethereum state tests.

## Modules

- `evmcore.spec`: `SpecId`, the hard forks in order from `FRONTIER` to
  `LATEST`, with `SpecId.enabled(other)` telling whether the rules of
  `other` are active; and `SpecName`, the fork names used in the `post`
  section of state-test files. `SpecName.from_name` maps names it does not
  know to `SpecName.UNKNOWN`, and `SpecName.to_spec_id` raises `ValueError`
  for `UNKNOWN`, `CONSTANTINOPLE` and `BYZANTIUM_TO_CONSTANTINOPLE_AT5`.
- `evmcore.constants`: the gas schedule constants (`SSTORE_SET`,
  `COLD_SLOAD_COST`, `CALL_STIPEND` and the rest).
- `evmcore.gas`: the `Gas` meter and the cost functions `sstore_refund`,
  `sstore_cost`, `sload_cost`, `create2_cost`, `exp_cost`,
  `verylowcopy_cost`, `extcodecopy_cost`, `account_access_gas`, `log_cost`,
  `sha3_cost`, `initcode_cost`, `selfdestruct_cost`, `call_cost`,
  `hot_cold_cost`, `memory_gas` and `initial_tx_gas`. Functions that take a
  `spec` follow the rules of that `SpecId`. Cost functions that can
  overflow return `None` when the result does not fit in 64 bits;
  `sstore_cost` also returns `None` when the gas left is at or below the
  call stipend (Istanbul onwards).
- `evmcore.models`: `CallInputs`, `CreateInputs`, `CallContext`,
  `Transfer`, `CallScheme`, `CreateScheme` (CREATE, or CREATE2 with a salt)
  and `SelfDestructResult`. Addresses are 20-byte `bytes`; values out of
  range raise `ValueError`.
- `evmcore.instruction_result`: `InstructionResult` codes, the outcome
  types `Eval`, `Halt` and `OutOfGasError`, `SuccessOrHalt` with
  `from_instruction_result`, `is_success`, `to_success`, `is_revert`,
  `is_halt` and `to_halt`, and the predicates `is_return_ok` and
  `is_return_revert`.
- `evmcore.host`: the abstract `Host` interface, the `Log` record and
  `DummyHost`. `DummyHost` keeps one flat storage map and a list of logs
  (`storage`, `logs`, emptied by `clear()`); every account looks cold and
  new with no balance and no code, and every block hash is zero (all of
  which can be changed through its `account_*` and `block_hash_value`
  attributes). Its `selfdestruct`, `create` and `call` raise
  `UnsupportedOperation`.
- `evmcore.deserializer`: parsers for the strings in state-test JSON:
  `parse_u64`, `parse_u256`, `parse_bytes`, `parse_bytes_list`,
  `parse_optional_address` and `parse_optional_bytes`. Bad input raises
  `ValueError`.
- `evmcore.merkle_trie`: `keccak256`, `rlp_encode`, `sec_trie_root`,
  `trie_root`, `TrieAccount`, `trie_account_rlp`, `state_merkle_trie_root`
  and `log_rlp_hash`.

## Installation

```
pip install evmcore
```

Python 3.10 or later is required. Keccak-256 comes from `pycryptodome`.

## Examples

Metering gas:

```python
from evmcore.gas import Gas

gas = Gas(100_000)
assert gas.record_cost(21_000)
assert gas.record_memory(96)
print(gas.spend, gas.remaining)
```

Costs depend on the hard fork:

```python
from evmcore.spec import SpecId
from evmcore.gas import sload_cost, initial_tx_gas

sload_cost(SpecId.BERLIN, is_cold=True)   # 2100
initial_tx_gas(SpecId.LONDON, b"\x00\x01", False, [])
```

Reading fork names from a state-test file:

```python
from evmcore.spec import SpecName

SpecName.from_name("Istanbul").to_spec_id()   # SpecId.ISTANBUL
```

Classifying an execution result:

```python
from evmcore.instruction_result import InstructionResult, SuccessOrHalt

outcome = SuccessOrHalt.from_instruction_result(InstructionResult.OUT_OF_GAS)
outcome.is_halt()   # True
```

Computing roots:

```python
from evmcore.merkle_trie import TrieAccount, log_rlp_hash, state_merkle_trie_root

account = TrieAccount(nonce=1, balance=10, storage={1: 2})
state_merkle_trie_root([(bytes(20), account)])
log_rlp_hash([])
```

## What this package does not do

There is no bytecode interpreter here: no opcode table, stack, memory or
execution loop, and no account database. Nothing loads or runs state-test
files, and there is no command-line tool; the package gives the pieces such
a runner needs (fork names, string parsers, state and log roots) but not the
runner itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```