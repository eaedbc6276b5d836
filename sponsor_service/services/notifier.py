# sponsor_service/services/notifier.py
import hashlib
import json
import logging
from typing import Any, Dict, Optional

from kafka import KafkaProducer
from kafka.errors import KafkaError

from sponsor_service.core.config import settings

logger = logging.getLogger(__name__)


def _log_delivery_failure(topic: str, message_id: str, exc: Exception) -> None:
    logger.error(f"Delivery of message {message_id} to {topic} failed: {exc}")


class RelevanceNotifier:
    """
    Tells downstream consumers that an edition's sponsors changed so they
    can recompute its relevance ("strength").

    Fire-and-forget: the send is not awaited and a lost message does not
    affect sponsor or audit state.
    """

    def __init__(
        self,
        producer: Optional[KafkaProducer],
        topic: str = settings.SPONSOR_STRENGTH_TOPIC,
    ):
        self.producer = producer
        self.topic = topic

    def publish(self, topic: str, payload: Dict[str, Any], key: Any = None) -> bool:
        if self.producer is None:
            logger.warning(f"No Kafka producer, dropping message for {topic}: {payload}")
            return False

        message_id = hashlib.md5(
            json.dumps(payload, sort_keys=True, default=str).encode("utf-8")
        ).hexdigest()

        try:
            future = self.producer.send(
                topic,
                value=payload,
                key=key,
                headers=[("message_id", message_id.encode("utf-8"))],
            )
        except KafkaError as e:
            logger.error(f"Failed to publish message {message_id} to {topic}: {e}")
            return False

        future.add_errback(_log_delivery_failure, topic, message_id)
        logger.info(f"Message {message_id} sent to {topic}: {payload}")
        return True

    def notify_sponsor_change(self, event_id: int, edition_id: Optional[int]) -> bool:
        return self.publish(
            self.topic, {"event": event_id, "edition": edition_id}, key=event_id
        )
