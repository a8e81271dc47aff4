from chainutils.domain.enums import (
    CHAIN_INFO_BYTES_SIZE,
    CHAIN_TYPE_FROM_STR,
    CHAIN_TYPE_TO_STR,
    SEPARATOR,
    ChainType,
    chain_type_from_str,
    chain_type_to_str,
    is_valid_chain_type,
)
from chainutils.exceptions import ChainUtilsError, InvalidChainTypeError

__all__ = [
    "CHAIN_INFO_BYTES_SIZE",
    "CHAIN_TYPE_FROM_STR",
    "CHAIN_TYPE_TO_STR",
    "SEPARATOR",
    "ChainType",
    "ChainUtilsError",
    "InvalidChainTypeError",
    "chain_type_from_str",
    "chain_type_to_str",
    "is_valid_chain_type",
]
