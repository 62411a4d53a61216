"""Asset symbol ↔ BIP-0044 coin type registry.

Token symbols carry their parent chain after a dot ("usdc.eth"); their ids are
the parent's coin type followed by a per-chain token index.
"""

_SYMBOL_IDS: dict[str, int] = {
    "btc": 0,
    "ltc": 2,
    "doge": 3,
    "dash": 5,
    "dgb": 20,
    "dcr": 42,
    "eth": 60,
    "zec": 133,
    "firo": 136,
    "bch": 145,
    "polygon": 966,
    "usdc.eth": 60001,
    "usdt.eth": 60002,
    "usdc.polygon": 966001,
    "weth.polygon": 966002,
}


def symbol_to_id(symbol: str) -> int | None:
    """Case-insensitive lookup; None when the symbol is not registered."""
    return _SYMBOL_IDS.get(symbol.lower())