"""Gas schedule constants."""

ZERO = 0
BASE = 2
VERYLOW = 3
LOW = 5
MID = 8
HIGH = 10
JUMPDEST = 1
SELFDESTRUCT = 24000
CREATE = 32000
CALLVALUE = 9000
NEWACCOUNT = 25000
EXP = 10
MEMORY = 3
LOG = 375
LOGDATA = 8
LOGTOPIC = 375
SHA3 = 30
SHA3WORD = 6
COPY = 3
BLOCKHASH = 20
CODEDEPOSIT = 200

SSTORE_SET = 20000
SSTORE_RESET = 5000
REFUND_SSTORE_CLEARS = 15000

TRANSACTION_ZERO_DATA = 4
TRANSACTION_NON_ZERO_DATA_INIT = 16
TRANSACTION_NON_ZERO_DATA_FRONTIER = 68

# EIP-2929 (Berlin) access costs
ACCESS_LIST_ADDRESS = 2400
ACCESS_LIST_STORAGE_KEY = 1900
COLD_SLOAD_COST = 2100
COLD_ACCOUNT_ACCESS_COST = 2600
WARM_STORAGE_READ_COST = 100

# EIP-3860: limit and meter initcode
INITCODE_WORD_COST = 2

CALL_STIPEND = 2300