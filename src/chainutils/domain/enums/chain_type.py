"""Chain families a value can be tagged with, and their canonical names."""

from enum import Enum
from types import MappingProxyType

from chainutils.exceptions import InvalidChainTypeError

CHAIN_INFO_BYTES_SIZE = 8  # Width of a chain-info field in serialized records; enforced by the serializer
SEPARATOR = "|"  # Joins chain name and value in composite keys built by consumers

CHAIN_TYPE_BITCOIN_STR = "bitcoin"
CHAIN_TYPE_EVM_STR = "evm"
CHAIN_TYPE_SOLANA_STR = "solana"
CHAIN_TYPE_COSMOS_STR = "cosmos"


class ChainType(int, Enum):
    """Ledger family. Values are compact codes for storage and transmission."""

    BITCOIN = 0
    EVM = 1
    SOLANA = 2
    COSMOS = 3

    def __str__(self) -> str:
        return self.to_str()

    def to_str(self) -> str:
        return chain_type_to_str(self)

    @staticmethod
    def is_valid(code: object) -> bool:
        return is_valid_chain_type(code)

    @classmethod
    def from_str(cls, text: str) -> "ChainType":
        return chain_type_from_str(text)

    @classmethod
    def from_code(cls, code: int) -> "ChainType":
        """Strict numeric conversion. Unlike to_str, fails on unknown codes."""
        if not is_valid_chain_type(code):
            raise InvalidChainTypeError(code)
        return cls(code)


CHAIN_TYPE_TO_STR = MappingProxyType({
    ChainType.BITCOIN: CHAIN_TYPE_BITCOIN_STR,
    ChainType.EVM: CHAIN_TYPE_EVM_STR,
    ChainType.SOLANA: CHAIN_TYPE_SOLANA_STR,
    ChainType.COSMOS: CHAIN_TYPE_COSMOS_STR,
})

CHAIN_TYPE_FROM_STR = MappingProxyType({name: chain_type for chain_type, name in CHAIN_TYPE_TO_STR.items()})

_MAX_CODE = max(ChainType).value


def is_valid_chain_type(code: object) -> bool:
    """True iff code is an integer in [0, max defined code]. Never raises."""
    if isinstance(code, bool) or not isinstance(code, int):
        return False
    return 0 <= code <= _MAX_CODE


def chain_type_to_str(code: object) -> str:
    """Canonical name for code, or "" when code is not a known chain type.

    Deliberately lenient: unknown codes degrade to an empty string instead of
    raising, while chain_type_from_str raises on unknown names. Callers that
    need strict checking must call is_valid_chain_type first.
    """
    if not is_valid_chain_type(code):
        return ""
    return CHAIN_TYPE_TO_STR.get(code, "")


def chain_type_from_str(text: str) -> ChainType:
    """Exact, case-sensitive lookup of a canonical name."""
    if not isinstance(text, str) or text not in CHAIN_TYPE_FROM_STR:
        raise InvalidChainTypeError(text)
    return CHAIN_TYPE_FROM_STR[text]


def chain_type_names() -> tuple[str, ...]:
    return tuple(CHAIN_TYPE_TO_STR[chain_type] for chain_type in ChainType)
