"""Pydantic schemas for direct messages."""
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from messagely.schemas.user import UserPublic


class MessageCreate(BaseModel):
    to_username: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)


class MessageOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class MessageDetail(BaseModel):
    id: int
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None
    from_user: UserPublic
    to_user: UserPublic


class OutboundMessage(BaseModel):
    id: int
    to_user: UserPublic
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class InboundMessage(BaseModel):
    id: int
    from_user: UserPublic
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None


class ReadReceipt(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    read_at: datetime


# Response envelopes ----------------------------------------------------------
class MessageOutEnvelope(BaseModel):
    message: MessageOut


class MessageDetailEnvelope(BaseModel):
    message: MessageDetail


class ReadReceiptEnvelope(BaseModel):
    message: ReadReceipt


class OutboundMessagesOut(BaseModel):
    messages: List[OutboundMessage]


class InboundMessagesOut(BaseModel):
    messages: List[InboundMessage]
