import os
from pathlib import Path

from dotenv import load_dotenv
from web3 import Web3

# Optional overrides from a .env at the project root
load_dotenv(dotenv_path=Path(__file__).resolve().parents[2] / ".env")

MIRROR_NODE_BASE_URL = os.getenv("MIRROR_NODE_BASE_URL", "https://mainnet-public.mirrornode.hedera.com")
MIRROR_NODE_API_URL = f"{MIRROR_NODE_BASE_URL.rstrip('/')}/api/v1"
HANDLE_API_BASE_URL = os.getenv("HANDLE_API_BASE_URL", "https://sure-angeline-piotrswierzy-b061c303.koyeb.app")

HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

POOL_ADDRESS = os.getenv("POOL_ADDRESS", "0x6c241d9dea13214b43d198585ce214caf4d346df").lower()
LOGS_PAGE_LIMIT = 100

SWAP_ABI = {
    "anonymous": False,
    "inputs": [
        {"indexed": True,  "internalType": "address", "name": "sender",     "type": "address"},
        {"indexed": False, "internalType": "uint256", "name": "amount0In",  "type": "uint256"},
        {"indexed": False, "internalType": "uint256", "name": "amount1In",  "type": "uint256"},
        {"indexed": False, "internalType": "uint256", "name": "amount0Out", "type": "uint256"},
        {"indexed": False, "internalType": "uint256", "name": "amount1Out", "type": "uint256"},
        {"indexed": True,  "internalType": "address", "name": "to",         "type": "address"},
    ],
    "name": "Swap",
    "type": "event",
}
SWAP_EVENT_SIGNATURE = "Swap(address,uint256,uint256,uint256,uint256,address)"
SWAP_TOPIC = Web3.keccak(text=SWAP_EVENT_SIGNATURE)

HBARK_TOKEN = "0x00000000000000000000000000000000004ca367"

TOKEN_METADATA = {
    HBARK_TOKEN: {"symbol": "HBARK", "decimals": 0},
    "HBAR":      {"symbol": "HBAR",  "decimals": 8},
}

PAIR_TOKEN_MAPPING = {
    "0x6c241d9dea13214b43d198585ce214caf4d346df": {
        "token0": "HBAR",
        "token1": HBARK_TOKEN,
    },
}

# Paying in BASE_SYMBOL is a buy, paying in QUOTE_SYMBOL is a sell
BASE_SYMBOL = "HBAR"
QUOTE_SYMBOL = "HBARK"
