"""Token view API models."""

from pydantic import BaseModel, Field


class TokenOwnerResponse(BaseModel):
    token_id: str
    owner: str


class TokenURIResponse(BaseModel):
    token_id: str
    uri: str


class BalanceResponse(BaseModel):
    address: str
    balance: int


class EnrollmentResponse(BaseModel):
    """Whether an address holds a student ID token."""

    address: str
    enrolled: bool


class TransferRequest(BaseModel):
    """Token transfer request. Always rejected: tokens are non-transferable."""

    from_address: str
    to_address: str
    token_id: str = Field(min_length=1)


class ApproveRequest(BaseModel):
    """Token approval request. Always rejected: tokens are non-transferable."""

    approved: str
    token_id: str = Field(min_length=1)
