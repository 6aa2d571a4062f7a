# miku

This package gives the building blocks of an instant-messaging server. It is
plain Python and needs no third-party libraries.

## Modules

| Module | Provides |
| --- | --- |
| `miku.common` | `Status` codes. Big-endian `read_be16/32/64` and `pack_be16/32/64`. `bswap32`, `bswap64`, `round_up`, `clamp`, `timestamp_ms`, `timestamp_us`, `version_full` |
| `miku.error` | `MikuError`, an exception that holds a status code and a message of at most 255 characters |
| `miku.checksum` | `fnv1a_64`, `crc32`, `crc32_update` |
| `miku.sha1` | `sha1`, which returns the 20-byte digest |
| `miku.codec` | `b64encode` and `b64decode`, standard padded Base64 |
| `miku.uuidgen` | `generate_uuid` and `generate_uuid_bytes`, in the version-4 layout |
| `miku.arena` | `Arena`, a bump allocator that hands out `memoryview`s from blocks of at least 4096 bytes |
| `miku.slab` | `Slab` and `SlabObject`, a pool of fixed-size slots |
| `miku.memory` | `Pool`, an arena with an optional slab |
| `miku.strbuf` | `StringBuilder`, a text buffer whose capacity doubles as it grows |
| `miku.hashmap` | `HashMap`, an open-addressing map with string keys and an optional `on_free` callback |
| `miku.rbtree` | `RBTree`, `RBNode`, `Color` |
| `miku.log` | `LogLevel`, `init`, `shutdown`, `set_level`, `set_rotation`, `write`, `trace`, `debug`, `info`, `warn`, `error`, `fatal` |
| `miku.config` | `Config`, a reader for a small indentation-based YAML subset with dotted keys |
| `miku.service_config` | `ServiceConfig` and `load_service_config` |
| `miku.graceful` | `Graceful`, which handles SIGTERM, SIGINT and SIGHUP |
| `miku.stats` | `Stats` and `StatsSnapshot`, thread-safe counters |
| `miku.discovery` | `Discovery` and `ServiceEntry`, an in-memory service registry |

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Examples

### Checksums and encodings

```python
from miku.checksum import crc32, fnv1a_64
from miku.codec import b64encode, b64decode
from miku.sha1 import sha1

crc32(b"123456789")          # 0xCBF43926
b64decode(b64encode(b"hi"))  # b"hi"
sha1(b"abc").hex()
```

`b64decode` raises `ValueError` for malformed input.

### Containers

```python
from miku.hashmap import HashMap
from miku.rbtree import RBTree

m = HashMap()
m.put("alice", 1)
m.get("alice")        # 1
m.delete("alice")     # KeyError if the key is missing

t = RBTree()
for v in (5, 1, 3):
    t.insert(v)
list(t)               # [1, 3, 5]
```

### Configuration

Nested keys are joined with dots:

```python
from miku.config import Config

cfg = Config()
cfg.load_string("api:\n  port: 10002\n")
cfg.get_int("api.port", 0)   # 10002
```

`load_service_config` reads `share.yml`, `mongodb.yml`, `redis.yml`,
`kafka.yml` and `log.yml` from a directory. Files that are missing are
skipped, and any key that is not set keeps its default:

```python
from miku.service_config import load_service_config

sc = load_service_config("config/")
sc.api_port, sc.ws_port      # 10002, 10001 by default
sc.log_summary()
```

### Service discovery

```python
from miku.discovery import Discovery

d = Discovery("localhost:2379")
d.register("user", "10.0.0.5", 10110, 30)
d.resolve("user", 8)          # [ServiceEntry(name='user', ...)]
d.deregister("user")          # KeyError if the name is not registered
```

### Graceful shutdown

```python
from miku.graceful import Graceful

with Graceful(300) as g:
    while g.running():
        ...
```

Leaving the `with` block restores the default signal handlers.

## What this package does not do

This is a library only. It has no command-line programs and no HTTP,
WebSocket or RPC servers. It does not connect to MongoDB, Redis, Kafka or
etcd, and it stores nothing. `ServiceConfig` only holds the settings for
those backends. `Discovery` keeps its entries in memory, and they never
expire.