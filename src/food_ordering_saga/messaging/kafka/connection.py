"""Broker settings shared by the Kafka transport and its health check."""

from __future__ import annotations

import logging
from typing import Any

from aiokafka.admin import AIOKafkaAdminClient

logger = logging.getLogger("food_ordering_saga.messaging.kafka")

# Keyword arguments AIOKafkaAdminClient understands; producer tuning such as
# ``acks`` or ``linger_ms`` is rejected by its signature.
ADMIN_CLIENT_KEYS = frozenset(
    {
        "client_id",
        "request_timeout_ms",
        "connections_max_idle_ms",
        "retry_backoff_ms",
        "metadata_max_age_ms",
        "security_protocol",
        "ssl_context",
        "api_version",
        "sasl_mechanism",
        "sasl_plain_username",
        "sasl_plain_password",
        "sasl_kerberos_service_name",
        "sasl_kerberos_domain_name",
        "sasl_oauth_token_provider",
    }
)


class KafkaConnectionManager:
    """Bootstrap servers plus client settings for one cluster.

    ``**config`` is handed to ``AIOKafkaProducer`` as is. The admin client
    used by :meth:`health_check` receives only the connection and security
    subset of it.

    Usage::

        connection = KafkaConnectionManager(
            "broker:9092", client_id="payment-service", acks="all"
        )
        transport = KafkaTransport(connection)
    """

    def __init__(
        self,
        bootstrap_servers: str | list[str] = "localhost:9092",
        **config: Any,
    ) -> None:
        self._bootstrap_servers = bootstrap_servers
        self._config = config

    @property
    def bootstrap_servers(self) -> str | list[str]:
        return self._bootstrap_servers

    def producer_config(self) -> dict[str, Any]:
        return {"bootstrap_servers": self._bootstrap_servers, **self._config}

    def admin_config(self) -> dict[str, Any]:
        admin = {k: v for k, v in self._config.items() if k in ADMIN_CLIENT_KEYS}
        return {"bootstrap_servers": self._bootstrap_servers, **admin}

    async def health_check(self) -> bool:
        """Return True if the cluster answers a topic listing."""
        admin = AIOKafkaAdminClient(**self.admin_config())
        try:
            await admin.start()
            try:
                await admin.list_topics()
            finally:
                await admin.close()
        except Exception:  # noqa: BLE001
            logger.warning(
                "Kafka health check failed for %s",
                self._bootstrap_servers,
                exc_info=True,
            )
            return False
        return True
