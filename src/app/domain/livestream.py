"""Modelos de domínio do livestream apresentado no frontend.

Os nomes de campo seguem o domínio; os aliases de serialização
são as chaves JSON que o frontend consome.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

STREAM_URL_NOT_FOUND = "Stream URL not found"


class Streamer(BaseModel):
    """Autor do cast do livestream."""

    model_config = ConfigDict(frozen=True)

    fid: int = 0
    username: str = ""
    display_name: str = ""
    avatar_url: str = Field(default="", serialization_alias="pfp_url")
    follower_count: int = Field(default=0, serialization_alias="followerCount")


class Channel(BaseModel):
    """Canal Farcaster do cast (vazio quando ausente)."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    image_url: str = ""


class StreamRecord(BaseModel):
    """Cast principal normalizado."""

    model_config = ConfigDict(frozen=True)

    cast_hash: str = Field(default="", serialization_alias="castHash")
    streamer: Streamer = Field(default_factory=Streamer)
    stream_url: str = Field(default=STREAM_URL_NOT_FOUND, serialization_alias="streamUrl")
    text: str = ""
    timestamp: str = ""
    likes_count: int = 0
    recasts_count: int = 0
    replies_count: int = 0
    channel: Channel = Field(default_factory=Channel)


class ReplyAuthor(BaseModel):
    """Autor de uma reply."""

    model_config = ConfigDict(frozen=True)

    fid: int = 0
    username: str = ""
    display_name: str = ""
    avatar_url: str = Field(default="", serialization_alias="pfp_url")


class ReplyReactions(BaseModel):
    """Contadores de reações de uma reply."""

    model_config = ConfigDict(frozen=True)

    likes_count: int = 0
    recasts_count: int = 0


class ReplyRecord(BaseModel):
    """Reply direta ao cast do livestream."""

    model_config = ConfigDict(frozen=True)

    hash: str = ""
    author: ReplyAuthor = Field(default_factory=ReplyAuthor)
    text: str = ""
    timestamp: str = ""
    reactions: ReplyReactions = Field(default_factory=ReplyReactions)


class PresentLivestream(BaseModel):
    """Resposta de /api/present."""

    model_config = ConfigDict(frozen=True)

    livestream_data: StreamRecord = Field(serialization_alias="livestreamData")
    replies_to_livestream: list[ReplyRecord] = Field(
        default_factory=list,
        serialization_alias="repliesToLivestream",
    )

    def to_response(self) -> dict[str, object]:
        """Serializa com as chaves JSON do frontend."""
        return self.model_dump(mode="json", by_alias=True)
