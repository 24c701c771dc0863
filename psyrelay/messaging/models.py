"""Inbound message types, decoupled from the Telegram client objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from telegram import Message, MessageEntity

GROUP_CHAT_TYPES = frozenset({"group", "supergroup"})


@dataclass(frozen=True)
class UserRef:
    id: int | None = None
    username: str | None = None


@dataclass(frozen=True)
class Entity:
    """Annotation over ``text[offset:offset + length]``.

    Offsets and lengths count UTF-16 code units, as Telegram sends them.
    """

    type: str
    offset: int
    length: int
    user: UserRef | None = None

    @classmethod
    def from_telegram(cls, entity: MessageEntity) -> Entity:
        user = None
        if entity.user is not None:
            user = UserRef(id=entity.user.id, username=entity.user.username)
        return cls(type=str(entity.type), offset=entity.offset, length=entity.length, user=user)


@dataclass(frozen=True)
class InboundMessage:
    chat_id: int
    chat_type: str
    message_id: int
    text: str
    entities: tuple[Entity, ...] = ()
    command: str = ""
    argument: str = ""

    @property
    def is_group(self) -> bool:
        return self.chat_type in GROUP_CHAT_TYPES

    @classmethod
    def from_telegram(cls, message: Message) -> InboundMessage:
        text = message.text or ""
        entities = tuple(Entity.from_telegram(e) for e in message.entities or ())
        command, argument = parse_command(text, entities)
        return cls(
            chat_id=message.chat.id,
            chat_type=str(message.chat.type),
            message_id=message.message_id,
            text=text,
            entities=entities,
            command=command,
            argument=argument,
        )


def parse_command(text: str, entities: tuple[Entity, ...] | list[Entity]) -> tuple[str, str]:
    """Split ``/cmd@bot args`` into ``("cmd", "args")``.

    Only a ``bot_command`` entity at offset 0 counts.  Returns
    ``("", "")`` for anything else.
    """
    if not entities:
        return "", ""
    first = entities[0]
    if first.type != "bot_command" or first.offset != 0:
        return "", ""
    # Commands are ASCII, so code-unit lengths index the str directly.
    command = text[1:first.length].split("@", 1)[0]
    argument = text[first.length + 1:] if len(text) > first.length else ""
    return command, argument
