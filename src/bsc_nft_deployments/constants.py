"""Configuration constants for bsc-nft-deployments library."""

# Network table. Values are literals except where an ``*_env`` key names the
# environment variable the value is read from at load time.
NETWORK_CONFIG = {
    "hardhat": {
        "chain_id": 31337,
        "chain_name": "Hardhat Network",
        "is_local": True,
    },
    "bscTestnet": {
        "chain_id": 97,
        "chain_name": "BNB Smart Chain Testnet",
        "block_explorer_url": "https://testnet.bscscan.com",
        "url_env": "BSC_TESTNET_URL",
        "accounts_env": "PRIVATE_KEY",
    },
    "bscMainnet": {
        "chain_id": 56,
        "chain_name": "BNB Smart Chain Mainnet",
        "block_explorer_url": "https://bscscan.com",
        "url_env": "BSC_MAINNET_URL",
        "accounts_env": "PRIVATE_KEY",
    },
}

# Profile selection
DEFAULT_NETWORK = "hardhat"
NETWORK_SELECTOR_ENV = "DEPLOY_NETWORK"

# Compiler defaults
SOLIDITY_VERSION = "0.8.20"
OPTIMIZER_ENABLED = True
OPTIMIZER_RUNS = 200

# Upstream solc release list (soliditylang.org binaries mirror)
SOLC_LIST_URL = "https://binaries.soliditylang.org/bin/list.json"

# Stable solc releases accepted without a network lookup (static; 0.4.11 to 0.8.30)
_PATCH_RANGES = {
    (0, 4): range(11, 27),
    (0, 5): range(0, 18),
    (0, 6): range(0, 13),
    (0, 7): range(0, 7),
    (0, 8): range(0, 31),
}

KNOWN_SOLC_VERSIONS = frozenset(
    f"{major}.{minor}.{patch}"
    for (major, minor), patches in _PATCH_RANGES.items()
    for patch in patches
)

# Accepted RPC endpoint schemes (http for JSON-RPC, ws for subscriptions)
URL_SCHEMES = ("http", "https", "ws", "wss")
