# tests/services/test_notifier.py
import hashlib
import json
from unittest.mock import MagicMock

from kafka.errors import KafkaTimeoutError

from sponsor_service.services.notifier import RelevanceNotifier, _log_delivery_failure


def test_notify_sends_edition_change_with_message_id():
    producer = MagicMock()
    notifier = RelevanceNotifier(producer, topic="event.strength.test")

    assert notifier.notify_sponsor_change(10, 3) is True

    payload = {"event": 10, "edition": 3}
    expected_id = hashlib.md5(json.dumps(payload, sort_keys=True).encode("utf-8")).hexdigest()
    producer.send.assert_called_once_with(
        "event.strength.test",
        value=payload,
        key=10,
        headers=[("message_id", expected_id.encode("utf-8"))],
    )
    producer.send.return_value.add_errback.assert_called_once_with(
        _log_delivery_failure, "event.strength.test", expected_id
    )


def test_same_payload_gets_same_message_id():
    producer = MagicMock()
    notifier = RelevanceNotifier(producer)

    notifier.publish("t", {"b": 2, "a": 1})
    notifier.publish("t", {"a": 1, "b": 2})

    first, second = producer.send.call_args_list
    assert first.kwargs["headers"] == second.kwargs["headers"]


def test_missing_producer_drops_message():
    notifier = RelevanceNotifier(None)

    assert notifier.notify_sponsor_change(10, 3) is False


def test_send_error_is_logged_not_raised():
    producer = MagicMock()
    producer.send.side_effect = KafkaTimeoutError("metadata timeout")
    notifier = RelevanceNotifier(producer)

    assert notifier.notify_sponsor_change(10, 3) is False
