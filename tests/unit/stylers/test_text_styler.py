# -*- coding: utf-8 -*-
"""Unit tests for NotificationTextStyler."""

from __future__ import annotations

from push_template_renderer.models.notification import (
    ActionButton,
    BigTextStyle,
    Bitmap,
    ConversationMessage,
    ConversationStyle,
    InboxStyle,
    LargeImageStyle,
    RenderableNotification,
    ResolvedColor,
)
from push_template_renderer.stylers.text_styler import NotificationTextStyler

COLOR = ResolvedColor(0xFF112233)


def test_default_notification_renders_header_and_body() -> None:
    text = NotificationTextStyler().render(
        RenderableNotification(id=7, color=COLOR, title="Hi", body="there", deeplink="app://x")
    )
    assert text == "🔔 Hi [#7 #FF112233]\nthere\n🔗 app://x"


def test_big_text_uses_expanded_body() -> None:
    notification = RenderableNotification(
        id=1, color=COLOR, style=BigTextStyle("long body"), title="T", body="long body"
    )
    assert NotificationTextStyler().render(notification) == "📝 T [#1 #FF112233]\nlong body"


def test_missing_title_falls_back_per_style() -> None:
    styler = NotificationTextStyler()
    inbox = RenderableNotification(id=1, color=COLOR, style=InboxStyle(("a", "b")))
    assert styler.render(inbox) == "📥 Inbox [#1 #FF112233]\n• a\n• b"


def test_conversation_lines_show_time_and_sender() -> None:
    style = ConversationStyle(
        messages=(
            ConversationMessage("Hello", 0, "John"),
            ConversationMessage("Hi", 90_000, "Me"),
        )
    )
    text = NotificationTextStyler().render(
        RenderableNotification(id=3, color=COLOR, style=style, title="Chat")
    )
    assert text.splitlines()[1:] == ["00:00 John: Hello", "00:01 Me: Hi"]


def test_large_image_shows_bitmap_summary() -> None:
    bitmap = Bitmap(url="http://img/x.png", data=b"\x89PNG\r\n\x1a\n", format="png")
    text = NotificationTextStyler().render(
        RenderableNotification(id=2, color=COLOR, style=LargeImageStyle(bitmap), body="caption")
    )
    assert "caption" in text
    assert "[png image, 8 bytes] http://img/x.png" in text
    assert text.startswith("🖼️ Image Notification")


def test_actions_and_silent_marker() -> None:
    notification = RenderableNotification(
        id=4,
        color=COLOR,
        actions=(ActionButton("Open", "https://x"),),
        sound_enabled=False,
    )
    lines = NotificationTextStyler().render(notification).splitlines()
    assert lines[-3:] == ["─" * 12, "▶ Open → https://x", "🔕 silent"]


def test_parse_html_escapes_and_bolds() -> None:
    notification = RenderableNotification(id=5, color=COLOR, title="<b>x</b>", body="a & b")
    text = NotificationTextStyler().render(notification, parse_html=True)
    assert text.startswith("🔔 <b>&lt;b&gt;x&lt;/b&gt;</b> [#5 #FF112233]")
    assert "a &amp; b" in text
