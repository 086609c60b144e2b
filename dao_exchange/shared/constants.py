"""Constants shared by the exchange arithmetic and the API layer."""

# Identifier used in place of a creator public key for the native coin
DESO_COIN_IDENTIFIER = "DESO"

# Base units per whole coin
NANOS_PER_UNIT = 10**9
BASE_UNITS_PER_COIN = 10**18

# Difference in base-unit granularity between DAO coins and $DESO (1e18 / 1e9)
DESO_TO_DAO_COIN_BASE_UNITS_SCALING_FACTOR = BASE_UNITS_PER_COIN // NANOS_PER_UNIT

# Scaled exchange rates carry 38 decimal places
EXCHANGE_RATE_PRECISION_DIGITS = 38
ONE_E38 = 10**EXCHANGE_RATE_PRECISION_DIGITS
# Numerator used to invert a scaled rate while keeping 38 decimal places
ONE_E76 = ONE_E38 * ONE_E38

MAX_UINT256 = 2**256 - 1

# Significant digits an IEEE-754 float64 reliably carries
FLOAT64_SUPPORTED_PRECISION_DIGITS = 15

# Base58Check network prefixes for secp256k1 public keys
MAINNET_PUBLIC_KEY_PREFIX = bytes([0xCD, 0x14, 0x00])
TESTNET_PUBLIC_KEY_PREFIX = bytes([0x11, 0xC2, 0x00])
PUBLIC_KEY_PREFIXES = {
    "mainnet": MAINNET_PUBLIC_KEY_PREFIX,
    "testnet": TESTNET_PUBLIC_KEY_PREFIX,
}
COMPRESSED_PUBLIC_KEY_SIZE = 33

# PKID recorded on order entries for the native coin side
ZERO_PKID = bytes(33)

# Access group key names
MIN_ACCESS_GROUP_KEY_NAME_CHARACTERS = 1
MAX_ACCESS_GROUP_KEY_NAME_CHARACTERS = 32
