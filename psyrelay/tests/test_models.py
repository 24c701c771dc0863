"""Tests for inbound message parsing."""

from __future__ import annotations

from unittest.mock import MagicMock

from psyrelay.messaging.models import Entity, InboundMessage, parse_command


def _cmd(length: int) -> Entity:
    return Entity(type="bot_command", offset=0, length=length)


class TestParseCommand:
    def test_command_with_argument(self) -> None:
        assert parse_command("/info aspirin", (_cmd(5),)) == ("info", "aspirin")

    def test_command_without_argument(self) -> None:
        assert parse_command("/start", (_cmd(6),)) == ("start", "")

    def test_strips_bot_suffix(self) -> None:
        assert parse_command("/info@doseslog_bot ibuprofen", (_cmd(18),)) == ("info", "ibuprofen")

    def test_argument_keeps_inner_spacing(self) -> None:
        assert parse_command("/info  two words", (_cmd(5),)) == ("info", " two words")

    def test_no_entities(self) -> None:
        assert parse_command("/start", ()) == ("", "")

    def test_command_not_at_start(self) -> None:
        entity = Entity(type="bot_command", offset=4, length=6)
        assert parse_command("hey /start", (entity,)) == ("", "")

    def test_first_entity_not_command(self) -> None:
        entities = (Entity(type="mention", offset=0, length=4), _cmd(6))
        assert parse_command("@bot /start", entities) == ("", "")


class TestInboundMessage:
    def test_is_group(self) -> None:
        base = dict(chat_id=1, message_id=1, text="x")
        assert InboundMessage(chat_type="group", **base).is_group
        assert InboundMessage(chat_type="supergroup", **base).is_group
        assert not InboundMessage(chat_type="private", **base).is_group
        assert not InboundMessage(chat_type="channel", **base).is_group

    def test_from_telegram(self) -> None:
        ent = MagicMock()
        ent.type = "bot_command"
        ent.offset = 0
        ent.length = 5
        ent.user = None
        msg = MagicMock()
        msg.text = "/info aspirin"
        msg.entities = (ent,)
        msg.chat.id = -100
        msg.chat.type = "supergroup"
        msg.message_id = 55

        inbound = InboundMessage.from_telegram(msg)

        assert inbound.chat_id == -100
        assert inbound.message_id == 55
        assert inbound.command == "info"
        assert inbound.argument == "aspirin"
        assert inbound.entities == (Entity(type="bot_command", offset=0, length=5),)
        assert inbound.is_group

    def test_from_telegram_without_text(self) -> None:
        msg = MagicMock()
        msg.text = None
        msg.entities = ()
        msg.chat.id = 1
        msg.chat.type = "private"
        msg.message_id = 2

        inbound = InboundMessage.from_telegram(msg)

        assert inbound.text == ""
        assert inbound.command == ""

    def test_from_telegram_mention_user(self) -> None:
        ent = MagicMock()
        ent.type = "mention"
        ent.offset = 0
        ent.length = 4
        ent.user.id = 9
        ent.user.username = "bot"
        msg = MagicMock()
        msg.text = "@bot hi"
        msg.entities = (ent,)
        msg.chat.id = 1
        msg.chat.type = "group"
        msg.message_id = 3

        inbound = InboundMessage.from_telegram(msg)

        assert inbound.entities[0].user is not None
        assert inbound.entities[0].user.username == "bot"
