"""
Test data generators for JSON parsing benchmarks.

Documents are built from a seeded random source and rendered with
rdjson.serialize, so every parser under comparison sees identical text:
- A wide object with nested records
- A mixed array of scalars and small objects
- A structure nested close to the depth limit
- String-heavy content with escape sequences
"""

import random
import string
from collections.abc import Callable

import rdjson

_SEED = 20240115
_ESCAPE_PROBABILITY = 0.3
_ESCAPES = ['"', "\\", "/", "\b", "\f", "\n", "\r", "\t"]


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators: dict[str, Callable[[random.Random], rdjson.JsonValue]] = {
        "small_object": _small_object,
        "large_object": _large_object,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
        "string_heavy": _string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return rdjson.serialize(generators[data_type](random.Random(_SEED)))


def _small_object(rng: random.Random) -> rdjson.JsonValue:
    return {
        "id": 12345.0,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }


def _large_object(rng: random.Random) -> rdjson.JsonValue:
    return {
        "user_id": float(rng.randint(1000000, 9999999)),
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(rng.uniform(1.0, 1000.0), 2),
                "currency": rng.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_word(rng, 20)}",
                "status": rng.choice(["completed", "pending", "failed"]),
            }
            for i in range(200)
        ],
    }


def _mixed_array(rng: random.Random) -> rdjson.JsonValue:
    makers: list[Callable[[], rdjson.JsonValue]] = [
        lambda: float(rng.randint(-1000, 1000)),
        lambda: round(rng.uniform(-100.0, 100.0), 3),
        lambda: _random_word(rng, rng.randint(5, 30)),
        lambda: rng.random() < 0.5,
        lambda: None,
        lambda: {"value": _random_word(rng, 10), "score": rng.uniform(0, 1)},
    ]
    return [rng.choice(makers)() for _ in range(1000)]


def _nested_structure(rng: random.Random) -> rdjson.JsonValue:
    """Binary tree of objects and arrays reaching nesting depth 18."""

    def node(depth: int) -> rdjson.JsonValue:
        if depth == 0:
            return {"value": _random_word(rng, 10)}
        return {
            "level": float(depth),
            "items": [node(depth - 1), node(depth - 1)],
        }

    return node(9)


def _string_heavy(rng: random.Random) -> rdjson.JsonValue:
    def escaped_string() -> str:
        chars = []
        for _ in range(50):
            if rng.random() < _ESCAPE_PROBABILITY:
                chars.append(rng.choice(_ESCAPES))
            else:
                chars.append(rng.choice(string.ascii_letters + " "))
        return "".join(chars)

    return {
        "strings": [escaped_string() for _ in range(200)],
        "unicode": [chr(rng.randint(0xA0, 0x2FFF)) * 8 for _ in range(100)],
    }


def _random_word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))
