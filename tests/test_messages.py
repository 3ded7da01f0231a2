from rentease.services.result import ResultStatus


def _send(services, sender, receiver, content="Habari"):
    return services.messages.send({"senderId": sender, "receiverId": receiver, "content": content, "read": True}).data


def test_send_starts_unread(services):
    message = _send(services, "user-a", "user-b")

    assert message.id.startswith("msg-")
    assert message.read is False


def test_mark_as_read(services):
    message = _send(services, "user-a", "user-b")

    result = services.messages.mark_as_read(message.id)

    assert result.data.read is True
    assert services.messages.get_by_id(message.id).data.read is True


def test_mark_unknown_message(services):
    assert services.messages.mark_as_read("msg-missing").status == ResultStatus.NOT_FOUND


def test_get_by_user_includes_sent_and_received(services):
    sent = _send(services, "user-a", "user-b")
    received = _send(services, "user-c", "user-a")
    _send(services, "user-b", "user-c")

    assert [m.id for m in services.messages.get_by_user("user-a").data] == [sent.id, received.id]
    assert [m.id for m in services.messages.get_inbox("user-a").data] == [received.id]


def test_unread_count(services):
    first = _send(services, "user-a", "user-b")
    _send(services, "user-c", "user-b")
    _send(services, "user-b", "user-a")
    services.messages.mark_as_read(first.id)

    assert services.messages.unread_count("user-b") == 1
