"""Normalizer Neynar: conversa bruta → StreamRecord + replies.

Obrigatórios: conversation, conversation.cast, cast.author e uma lista
``embeds`` não vazia. Todo o resto cai para valores zero. Replies
malformadas são descartadas sem interromper a normalização.
"""

from __future__ import annotations

import logging
from typing import Any

from api.normalizers.neynar.extractor import (
    get_int,
    get_list,
    get_mapping,
    get_string,
)
from app.domain.livestream import (
    STREAM_URL_NOT_FOUND,
    Channel,
    ReplyAuthor,
    ReplyReactions,
    ReplyRecord,
    Streamer,
    StreamRecord,
)
from utils.errors import NoEmbedsError, ShapeInvalidError

logger = logging.getLogger(__name__)


def normalize_conversation(
    raw: dict[str, Any],
) -> tuple[StreamRecord, list[ReplyRecord]]:
    """Normaliza a resposta de ``/cast/conversation``.

    Args:
        raw: JSON decodificado da API externa.

    Returns:
        (StreamRecord do cast principal, replies diretas na ordem original)

    Raises:
        ShapeInvalidError: conversation, cast ou author ausentes/não-objeto.
        NoEmbedsError: embeds ausente ou vazio.
    """
    conversation, present = get_mapping(raw, "conversation")
    if not present:
        raise ShapeInvalidError("conversation not found in response")

    cast, present = get_mapping(conversation, "cast")
    if not present:
        raise ShapeInvalidError("cast not found in conversation")

    record = normalize_stream_cast(cast)
    replies = normalize_direct_replies(cast)
    return record, replies


def normalize_stream_cast(cast: dict[str, Any]) -> StreamRecord:
    """Monta o StreamRecord a partir do cast principal."""
    author, present = get_mapping(cast, "author")
    if not present:
        raise ShapeInvalidError("author not found in cast")

    embeds, _ = get_list(cast, "embeds")
    if not embeds:
        raise NoEmbedsError("no embeds found in cast")

    stream_url, present = get_string(embeds[0], "url")
    if not present:
        stream_url = STREAM_URL_NOT_FOUND

    reactions, _ = get_mapping(cast, "reactions")
    replies, _ = get_mapping(cast, "replies")
    channel, channel_present = get_mapping(cast, "channel")
    if not channel_present:
        logger.debug("stream_cast_without_channel")

    return StreamRecord(
        cast_hash=get_string(cast, "hash")[0],
        streamer=Streamer(
            fid=get_int(author, "fid")[0],
            username=get_string(author, "username")[0],
            display_name=get_string(author, "display_name")[0],
            avatar_url=get_string(author, "pfp_url")[0],
            follower_count=get_int(author, "follower_count")[0],
        ),
        stream_url=stream_url,
        text=get_string(cast, "text")[0],
        timestamp=get_string(cast, "timestamp")[0],
        likes_count=get_int(reactions, "likes_count")[0],
        recasts_count=get_int(reactions, "recasts_count")[0],
        replies_count=get_int(replies, "count")[0],
        channel=Channel(
            id=get_string(channel, "id")[0],
            name=get_string(channel, "name")[0],
            image_url=get_string(channel, "image_url")[0],
        ),
    )


def normalize_direct_replies(cast: dict[str, Any]) -> list[ReplyRecord]:
    """Normaliza ``direct_replies``; ausente vira lista vazia."""
    direct_replies, _ = get_list(cast, "direct_replies")

    records: list[ReplyRecord] = []
    skipped = 0
    for entry in direct_replies:
        if not isinstance(entry, dict):
            skipped += 1
            continue
        records.append(normalize_reply(entry))

    if skipped:
        logger.info("direct_replies_skipped", extra={"skipped_count": skipped})
    return records


def normalize_reply(reply: dict[str, Any]) -> ReplyRecord:
    """Monta ReplyRecord; author/reactions ausentes viram zero."""
    author, _ = get_mapping(reply, "author")
    reactions, _ = get_mapping(reply, "reactions")
    return ReplyRecord(
        hash=get_string(reply, "hash")[0],
        author=ReplyAuthor(
            fid=get_int(author, "fid")[0],
            username=get_string(author, "username")[0],
            display_name=get_string(author, "display_name")[0],
            avatar_url=get_string(author, "pfp_url")[0],
        ),
        text=get_string(reply, "text")[0],
        timestamp=get_string(reply, "timestamp")[0],
        reactions=ReplyReactions(
            likes_count=get_int(reactions, "likes_count")[0],
            recasts_count=get_int(reactions, "recasts_count")[0],
        ),
    )
