"""Message value objects with chainable setters.

Every setter updates exactly one attribute and returns the same object, so a
message reads as a single expression:

    Message().set_text("Deploy done").set_attachments([
        Attachment().set_title("Build #42").set_color("#2eb886"),
    ])

Unset optional attributes stay None and are left out of the wire payload.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from pydantic import BaseModel


class Field(BaseModel):
    """Key/value pair rendered inside an attachment."""
    short: Optional[bool] = None  # Rocket.Chat treats unset as False
    title: str = ""
    value: str = ""

    def set_title(self, title: str) -> "Field":
        self.title = title
        return self

    def set_value(self, value: str) -> "Field":
        self.value = value
        return self

    def set_short(self, short: bool) -> "Field":
        self.short = short
        return self


class Attachment(BaseModel):
    title: Optional[str] = None
    title_link: Optional[str] = None
    color: Optional[str] = None  # left border color
    author_name: Optional[str] = None
    author_icon: Optional[str] = None  # only displayed when author_name is set
    text: Optional[str] = None
    image_url: Optional[str] = None
    fields: List[Field] = []

    def set_title(self, title: str) -> "Attachment":
        self.title = title
        return self

    def set_title_link(self, title_link: str) -> "Attachment":
        self.title_link = title_link
        return self

    def set_color(self, color: str) -> "Attachment":
        self.color = color
        return self

    def set_author(self, name: str, icon: Optional[str] = None) -> "Attachment":
        """
        Sets the author name, and the icon only when one is given.
        Passing no icon never clears an icon set earlier.
        """
        self.author_name = name
        if icon is not None:
            self.author_icon = icon
        return self

    def set_text(self, text: str) -> "Attachment":
        self.text = text
        return self

    def set_image(self, url: str) -> "Attachment":
        self.image_url = url
        return self

    def set_fields(self, fields: Sequence[Field]) -> "Attachment":
        """Replaces the whole field list."""
        self.fields = list(fields)
        return self


class Message(BaseModel):
    """Text on top of an ordered list of attachments."""
    text: Optional[str] = None
    attachments: List[Attachment] = []

    def set_text(self, text: str) -> "Message":
        self.text = text
        return self

    def set_attachments(self, attachments: Sequence[Attachment]) -> "Message":
        """Replaces the whole attachment list; order is display order."""
        self.attachments = list(attachments)
        return self
