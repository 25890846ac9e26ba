"""
Test data generators for JSON parsing benchmarks.

Every document is written by the standard library encoder and stays inside
the grammar typedjson accepts: no exponents and no escapes that change
meaning under its one-character escape rule.
"""

import json
import random
import string
from dataclasses import dataclass
from typing import Any

_SEED = 1729
_SCALAR_KINDS = ("int", "float", "string", "bool", "null", "object")


@dataclass
class Address:
    street: str
    city: str
    zip: str


@dataclass
class LineItem:
    sku: str
    quantity: int
    price: float


@dataclass
class Order:
    id: int
    customer: str
    shipping: Address
    items: list[LineItem]
    paid: bool = False
    note: str | None = None


def generate_test_data(data_type: str) -> str:
    """Generates JSON test data based on specified type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
        "orders": _generate_orders,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    random.seed(_SEED)
    return generators[data_type]()


def _generate_small_object() -> str:
    """Generates a small JSON object (< 1KB) with basic key-value pairs."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": "2024-01-15T10:30:00Z", "source": "api"},
    }
    return json.dumps(data)


def _generate_large_object() -> str:
    """Generates a large JSON object (> 10KB) with many fields."""
    data = {
        "user_id": random.randint(1000000, 9999999),
        "profile": {
            "first_name": _random_string(10),
            "last_name": _random_string(12),
            "address": _random_address(),
            "language": random.choice(["en", "es", "fr", "de", "zh"]),
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(random.uniform(1.0, 1000.0), 2),
                "currency": random.choice(["USD", "EUR", "GBP", "JPY"]),
                "description": f"Payment for {_random_string(20)}",
                "status": random.choice(["completed", "pending", "failed"]),
            }
            for i in range(80)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array() -> str:
    """Generates a large array with mixed data types."""
    array: list[Any] = []

    for i in range(200):
        kind = random.choice(_SCALAR_KINDS)
        if kind == "int":
            array.append(random.randint(-1000, 1000))
        elif kind == "float":
            array.append(round(random.uniform(-100.0, 100.0), 3))
        elif kind == "string":
            array.append(_random_string(random.randint(5, 30)))
        elif kind == "bool":
            array.append(random.choice([True, False]))
        elif kind == "null":
            array.append(None)
        else:
            array.append(
                {
                    "index": i,
                    "value": _random_string(10),
                    "score": round(random.uniform(0, 100), 2),
                }
            )

    return json.dumps(array)


def _generate_nested_structure() -> str:
    """Generates deeply nested JSON structure."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "data": _random_string(15),
            "items": [create_nested_dict(depth - 1) for _ in range(3)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(7))


def _generate_string_heavy() -> str:
    """Generates JSON dominated by long strings with quotes and backslashes."""

    def create_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < 0.2:
                chars.append(random.choice(['"', "\\", "/"]))
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    data = {
        "strings": [create_string() for _ in range(100)],
        "paths": {
            f"key_{i}": f"C:\\Users\\{_random_string(8)}\\file_{i}.txt"
            for i in range(20)
        },
    }
    return json.dumps(data)


def _generate_orders() -> str:
    """Generates an array of orders shaped like the Order class."""
    orders = [
        {
            "id": i,
            "customer": _random_string(12),
            "shipping": _random_address(),
            "items": [
                {
                    "sku": _random_string(6).upper(),
                    "quantity": random.randint(1, 9),
                    "price": round(random.uniform(1.0, 200.0), 2),
                }
                for _ in range(random.randint(1, 6))
            ],
            "paid": random.choice([True, False]),
        }
        for i in range(100)
    ]
    return json.dumps(orders)


def _random_address() -> dict[str, str]:
    return {
        "street": f"{random.randint(1, 9999)} {_random_string(8)} St",
        "city": _random_string(12),
        "zip": f"{random.randint(10000, 99999)}",
    }


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
