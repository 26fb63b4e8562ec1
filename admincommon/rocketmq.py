"""Message queue producer and consumer configuration with default filling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AllocateStrategy(str, Enum):
    """How message queues are shared out among the consumers of a group."""

    AVERAGELY = "AllocateByAveragely"
    AVERAGELY_CIRCLE = "AllocateByAveragelyCircle"
    MACHINE_NEARBY = "AllocateByMachineNearby"


@dataclass
class ProducerConf:
    """Producer settings; :meth:`validate` fills unset fields with defaults."""

    ns_resolver: list[str] | None = None
    group_name: str = ""
    namespace: str = ""
    instance_name: str = ""
    msg_timeout: int = 0
    default_topic_queue_nums: int = 0
    create_topic_key: str = ""
    compress_msg_body_over_how_much: int = 0
    compress_level: int = 0
    retry: int = 0
    access_key: str = ""
    secret_key: str = ""

    def validate(self) -> None:
        """Check the resolver and fill unset fields with their defaults.

        Raises ValueError when no name server resolver is configured.
        """
        if self.ns_resolver is None:
            raise ValueError("the revolver must not be empty")
        self.group_name = self.group_name or "DEFAULT_PRODUCER"
        self.namespace = self.namespace or "DEFAULT"
        self.instance_name = self.instance_name or "DEFAULT"
        self.msg_timeout = self.msg_timeout or 3
        self.default_topic_queue_nums = self.default_topic_queue_nums or 4
        self.create_topic_key = self.create_topic_key or "TBW102"
        self.compress_msg_body_over_how_much = self.compress_msg_body_over_how_much or 4096
        self.compress_level = self.compress_level or 5
        self.retry = self.retry or 2


@dataclass
class ConsumerConf:
    """Consumer settings; :meth:`validate` fills unset fields with defaults."""

    ns_resolver: list[str] | None = None
    group_name: str = ""
    namespace: str = ""
    instance_name: str = ""
    strategy: str = ""
    rebalance_lock_interval: int = 0
    # -1 means the broker default of 16 attempts.
    max_reconsume_times: int = 0
    # BroadCasting, Clustering or Unknown.
    consumer_model: str = ""
    auto_commit: bool = False
    resolver: str = ""
    access_key: str = ""
    secret_key: str = ""
    _extra: dict = field(default_factory=dict, repr=False, compare=False)

    def validate(self) -> None:
        """Check the resolver and fill unset fields with their defaults.

        Raises ValueError when no name server resolver is configured.
        """
        if self.ns_resolver is None:
            raise ValueError("the revolver must not be empty")
        self.group_name = self.group_name or "DEFAULT_CONSUMER"
        self.namespace = self.namespace or "DEFAULT"
        self.instance_name = self.instance_name or "DEFAULT"
        self.strategy = self.strategy or AllocateStrategy.AVERAGELY.value
        self.rebalance_lock_interval = self.rebalance_lock_interval or 20
        if self.max_reconsume_times == 0:
            self.max_reconsume_times = -1
        self.consumer_model = self.consumer_model or "Clustering"
        self.resolver = self.resolver or "DEFAULT"

    def allocate_strategy(self) -> AllocateStrategy:
        """Return the configured strategy; unknown names give AVERAGELY."""
        try:
            return AllocateStrategy(self.strategy)
        except ValueError:
            return AllocateStrategy.AVERAGELY