"""Pydantic models for the result of the ``block`` RPC method."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BlockHeaderView(BaseModel):
    """Header section of a block as returned by the node."""

    height: int = 0
    epoch_id: str = ""
    next_epoch_id: str = ""
    hash: str = ""
    prev_hash: str = ""
    prev_state_root: str = ""
    chunk_receipts_root: str = ""
    chunk_headers_root: str = ""
    chunk_tx_root: str = ""
    outcome_root: str = ""
    chunks_included: int = 0
    challenges_root: str = ""
    timestamp: int = Field(default=0, description="Unix time in nanoseconds")
    timestamp_nanosec: str = Field(
        default="", description="Same instant as a decimal string"
    )
    random_value: str = ""
    # Opaque JSON: the node's proposal records are passed through as-is
    validator_proposals: list[Any] = Field(default_factory=list)
    chunk_mask: list[bool] = Field(default_factory=list)
    gas_price: str = Field(default="", description="Yocto balance as string")
    rent_paid: str = ""
    validator_reward: str = ""
    total_supply: str = Field(default="", description="Yocto balance as string")
    challenges_result: list[Any] = Field(default_factory=list)
    last_final_block: str = ""
    last_ds_final_block: str = ""
    next_bp_hash: str = ""
    block_merkle_root: str = ""
    # Absent approvals are sent as null
    approvals: list[str | None] = Field(default_factory=list)
    signature: str = ""
    latest_protocol_version: int = 0

    model_config = ConfigDict(extra="allow", frozen=True, strict=True)


class ChunkHeaderView(BaseModel):
    """One chunk header included in a block."""

    chunk_hash: str = ""
    prev_block_hash: str = ""
    outcome_root: str = ""
    prev_state_root: str = ""
    encoded_merkle_root: str = ""
    encoded_length: int = 0
    height_created: int = 0
    height_included: int = 0
    shard_id: int = 0
    gas_used: int = 0
    gas_limit: int = 0
    rent_paid: str = ""
    validator_reward: str = ""
    balance_burnt: str = ""
    outgoing_receipts_root: str = ""
    tx_root: str = ""
    validator_proposals: list[Any] = Field(default_factory=list)
    signature: str = ""

    model_config = ConfigDict(extra="allow", frozen=True, strict=True)


class BlockResult(BaseModel):
    """Result of ``block``: author, header and chunk headers, as received."""

    author: str = ""
    header: BlockHeaderView = Field(default_factory=BlockHeaderView)
    chunks: list[ChunkHeaderView] = Field(default_factory=list)

    model_config = ConfigDict(extra="allow", frozen=True, strict=True)

    @property
    def height(self) -> int:
        return self.header.height

    @property
    def hash(self) -> str:
        return self.header.hash

    def to_json_dict(self) -> dict[str, Any]:
        """Encode back to the node's JSON shape, extra keys included."""
        return self.model_dump(mode="json")


__all__ = [
    "BlockHeaderView",
    "BlockResult",
    "ChunkHeaderView",
]
