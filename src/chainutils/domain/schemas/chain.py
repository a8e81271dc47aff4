from typing import Annotated

from pydantic import BaseModel, BeforeValidator, PlainSerializer, field_validator

from chainutils.domain.enums import ChainType, chain_type_from_str
from chainutils.exceptions import InvalidChainTypeError


def _coerce_chain_type(v: object) -> ChainType:
    """Accept a member, a canonical name, or a numeric code (also as an ASCII digit string)."""
    if isinstance(v, ChainType):
        return v
    if isinstance(v, str):
        if v.isascii() and v.isdigit():
            return ChainType.from_code(int(v))
        return chain_type_from_str(v)
    if isinstance(v, int) and not isinstance(v, bool):
        return ChainType.from_code(v)
    raise InvalidChainTypeError(v)


ChainTypeName = Annotated[
    ChainType,
    BeforeValidator(_coerce_chain_type),
    PlainSerializer(lambda v: v.to_str(), return_type=str),
]


class ChainTagged(BaseModel):
    """A value (address, tx reference, ...) tagged with its chain family."""

    chain_type: ChainTypeName
    value: str

    @field_validator("value")
    @classmethod
    def strip_value(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value must not be empty")
        return v
