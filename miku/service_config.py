"""Service settings assembled from the YAML files in a configuration directory."""

from __future__ import annotations

import os
from dataclasses import dataclass

from miku import log
from miku.config import Config

CONFIG_FILES = ("share.yml", "mongodb.yml", "redis.yml", "kafka.yml", "log.yml")


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _text(value: str | None, size: int) -> str:
    return (value or "")[:size - 1]


@dataclass
class ServiceConfig:
    """Listen addresses, RPC ports and backend settings shared by all services."""

    listen_ip: str = "0.0.0.0"
    api_port: int = 10002
    ws_port: int = 10001
    rpc_auth_port: int = 10100
    rpc_user_port: int = 10110
    rpc_friend_port: int = 10120
    rpc_group_port: int = 10150
    rpc_conversation_port: int = 10180
    rpc_msg_port: int = 10130
    rpc_third_port: int = 10200
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "miku"
    mongo_pool_size: int = 64
    redis_address: str = "localhost:6379"
    redis_db: int = 0
    redis_pool_size: int = 32
    kafka_brokers: str = "localhost:9092"
    kafka_topic: str = "miku_msg"
    kafka_group_id: str = "miku-msgtransfer"
    log_level: str = "info"
    log_output: str = "stdout"

    def log_summary(self) -> None:
        """Write every setting to the log at INFO level."""
        log.info("=== Service Config ===")
        log.info(f"  listen_ip:    {self.listen_ip}")
        log.info(f"  api_port:     {self.api_port}")
        log.info(f"  ws_port:      {self.ws_port}")
        log.info(f"  rpc auth:     {self.rpc_auth_port}")
        log.info(f"  rpc user:     {self.rpc_user_port}")
        log.info(f"  rpc friend:   {self.rpc_friend_port}")
        log.info(f"  rpc group:    {self.rpc_group_port}")
        log.info(f"  rpc conv:     {self.rpc_conversation_port}")
        log.info(f"  rpc msg:      {self.rpc_msg_port}")
        log.info(f"  rpc third:    {self.rpc_third_port}")
        log.info(f"  mongo:        {self.mongo_uri}/{self.mongo_database} (pool={self.mongo_pool_size})")
        log.info(f"  redis:        {self.redis_address} db={self.redis_db} pool={self.redis_pool_size}")
        log.info(f"  kafka:        {self.kafka_brokers} topic={self.kafka_topic} group={self.kafka_group_id}")
        log.info(f"  log:          {self.log_level} -> {self.log_output}")


def _try_load(cfg: Config, config_dir: str, filename: str) -> None:
    path = os.path.join(config_dir, filename)
    try:
        cfg.load_file(path)
    except OSError:
        return
    log.info(f"Loaded config: {path}")


def load_service_config(config_dir: str | os.PathLike) -> ServiceConfig:
    """Read the known files in ``config_dir``; missing files and keys keep their defaults."""
    directory = os.fspath(config_dir)
    cfg = Config()
    for filename in CONFIG_FILES:
        _try_load(cfg, directory, filename)

    d = ServiceConfig()

    def num(key: str, default: int) -> int:
        return _int32(cfg.get_int(key, default))

    return ServiceConfig(
        listen_ip=_text(cfg.get_str("listenIP", d.listen_ip), 64),
        api_port=num("api.port", d.api_port),
        ws_port=num("msggateway.port", d.ws_port),
        rpc_auth_port=num("rpc.auth.port", d.rpc_auth_port),
        rpc_user_port=num("rpc.user.port", d.rpc_user_port),
        rpc_friend_port=num("rpc.friend.port", d.rpc_friend_port),
        rpc_group_port=num("rpc.group.port", d.rpc_group_port),
        rpc_conversation_port=num("rpc.conversation.port", d.rpc_conversation_port),
        rpc_msg_port=num("rpc.msg.port", d.rpc_msg_port),
        rpc_third_port=num("rpc.third.port", d.rpc_third_port),
        mongo_uri=_text(cfg.get_str("uri", d.mongo_uri), 256),
        mongo_database=_text(cfg.get_str("database", d.mongo_database), 64),
        mongo_pool_size=num("maxPoolSize", d.mongo_pool_size),
        redis_address=_text(cfg.get_str("address", d.redis_address), 128),
        redis_db=num("db", d.redis_db),
        redis_pool_size=num("poolSize", d.redis_pool_size),
        kafka_brokers=_text(cfg.get_str("brokers", d.kafka_brokers), 256),
        kafka_topic=_text(cfg.get_str("topic", d.kafka_topic), 64),
        kafka_group_id=_text(cfg.get_str("groupId", d.kafka_group_id), 64),
        log_level=_text(cfg.get_str("level", d.log_level), 32),
        log_output=_text(cfg.get_str("output", d.log_output), 64),
    )