# tests/core/test_kafka_producer.py
from unittest.mock import MagicMock, patch

from kafka.errors import KafkaTimeoutError, NoBrokersAvailable

from sponsor_service.core.kafka_producer import get_kafka_producer


def test_producer_is_flushed_and_closed():
    producer = MagicMock()
    with patch("sponsor_service.core.kafka_producer.KafkaProducer", return_value=producer):
        dependency = get_kafka_producer()
        assert next(dependency) is producer
        dependency.close()

    producer.flush.assert_called_once()
    producer.close.assert_called_once()


def test_unreachable_brokers_yield_none():
    with patch(
        "sponsor_service.core.kafka_producer.KafkaProducer",
        side_effect=NoBrokersAvailable(),
    ):
        dependency = get_kafka_producer()
        assert next(dependency) is None
        dependency.close()


def test_flush_failure_still_closes_producer():
    producer = MagicMock()
    producer.flush.side_effect = KafkaTimeoutError("flush timed out")
    with patch("sponsor_service.core.kafka_producer.KafkaProducer", return_value=producer):
        dependency = get_kafka_producer()
        next(dependency)
        dependency.close()

    producer.close.assert_called_once()


def test_key_serializer_leaves_missing_keys_unset():
    with patch("sponsor_service.core.kafka_producer.KafkaProducer") as producer_cls:
        dependency = get_kafka_producer()
        next(dependency)
        dependency.close()

    key_serializer = producer_cls.call_args.kwargs["key_serializer"]
    assert key_serializer(None) is None
    assert key_serializer(10) == b"10"
