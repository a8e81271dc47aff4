from chainutils.domain.enums.chain_type import (
    CHAIN_INFO_BYTES_SIZE,
    CHAIN_TYPE_BITCOIN_STR,
    CHAIN_TYPE_COSMOS_STR,
    CHAIN_TYPE_EVM_STR,
    CHAIN_TYPE_FROM_STR,
    CHAIN_TYPE_SOLANA_STR,
    CHAIN_TYPE_TO_STR,
    SEPARATOR,
    ChainType,
    chain_type_from_str,
    chain_type_names,
    chain_type_to_str,
    is_valid_chain_type,
)

__all__ = [
    "CHAIN_INFO_BYTES_SIZE",
    "CHAIN_TYPE_BITCOIN_STR",
    "CHAIN_TYPE_COSMOS_STR",
    "CHAIN_TYPE_EVM_STR",
    "CHAIN_TYPE_FROM_STR",
    "CHAIN_TYPE_SOLANA_STR",
    "CHAIN_TYPE_TO_STR",
    "SEPARATOR",
    "ChainType",
    "chain_type_from_str",
    "chain_type_names",
    "chain_type_to_str",
    "is_valid_chain_type",
]
