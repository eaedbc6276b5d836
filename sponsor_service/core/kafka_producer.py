# sponsor_service/core/kafka_producer.py

import json
import logging

from kafka import KafkaProducer
from kafka.errors import KafkaError

from sponsor_service.core.config import settings

logger = logging.getLogger(__name__)


def get_kafka_producer():
    """
    FastAPI dependency to create and yield a Kafka producer.
    Ensures the producer is properly closed after the request.

    Yields None when the brokers cannot be reached: downstream
    notification is best-effort and must not fail the request.
    """
    try:
        producer = KafkaProducer(
            bootstrap_servers=settings.KAFKA_BOOTSTRAP_SERVERS,
            value_serializer=lambda v: json.dumps(v, default=str).encode("utf-8"),
            # A None key is sent as no key, not b"None"
            key_serializer=lambda k: str(k).encode("utf-8") if k is not None else None,
            # Fail fast on connection issues during a request
            request_timeout_ms=settings.KAFKA_REQUEST_TIMEOUT_MS,
        )
    except KafkaError as e:
        logger.warning(f"Kafka unavailable, downstream notifications disabled: {e}")
        yield None
        return

    try:
        yield producer
    finally:
        try:
            producer.flush()  # Ensure all buffered messages are sent
        except KafkaError as e:
            logger.error(f"Failed to flush Kafka producer: {e}")
        producer.close()
