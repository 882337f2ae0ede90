"""Notification request model."""

from pydantic import BaseModel, Field


class NotificationRequest(BaseModel):
    """Per-entry rendering handed to every enabled sink."""

    identifier: str = Field("", description="Identifier of the source entry")
    title: str = Field("", description="Notification title")
    link: str = Field("", description="Entry URL")
    plain_text_body: str = Field("", description="Body converted to plain text")
    rich_text_body: str = Field("", description="Original markup body")
