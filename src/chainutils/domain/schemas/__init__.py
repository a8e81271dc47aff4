from chainutils.domain.schemas.chain import ChainTagged, ChainTypeName

__all__ = ["ChainTagged", "ChainTypeName"]
