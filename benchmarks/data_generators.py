"""
Test data generators for JSON parsing benchmarks.

Creates JSON byte buffers exercising each production of the parser:
- Different sizes (small/large objects, long arrays)
- Escape-heavy strings, including surrogate pairs
- Number-heavy arrays and deep container nesting
"""

import json
import random
import string
from typing import Any

# Constants for random data generation
_INT_TYPE = 1
_FLOAT_TYPE = 2
_STRING_TYPE = 3
_BOOL_TYPE = 4
_NULL_TYPE = 5
_ESCAPE_PROBABILITY = 0.3

DATA_TYPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "number_heavy",
    "nested_structure",
    "string_heavy",
)


def generate_test_data(data_type: str, seed: int = 1234) -> bytes:
    """Generates a UTF-8 JSON document of the given type."""
    generators = {
        "small_object": _generate_small_object,
        "large_object": _generate_large_object,
        "mixed_array": _generate_mixed_array,
        "number_heavy": _generate_number_heavy,
        "nested_structure": _generate_nested_structure,
        "string_heavy": _generate_string_heavy,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    random.seed(seed)
    return generators[data_type]().encode("utf-8")


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
    """Generates a large JSON object (> 10KB) of records with repeated keys."""
    data = {
        "account": random.randint(1000000, 9999999),
        "owner": {
            "name": _random_string(12),
            "city": _random_string(10),
            "verified": random.choice([True, False]),
        },
        "transactions": [
            {
                "id": f"txn_{i:06d}",
                "amount": round(random.uniform(1.0, 1000.0), 2),
                "currency": random.choice(["USD", "EUR", "GBP", "JPY"]),
                "status": random.choice(["completed", "pending", "failed"]),
                "note": None,
            }
            for i in range(120)
        ],
    }
    return json.dumps(data)


def _generate_mixed_array() -> str:
    """Generates a large array with mixed data types."""
    array: list[Any] = []

    for i in range(400):
        choice = random.randint(1, 6)
        if choice == _INT_TYPE:
            array.append(random.randint(-1000, 1000))
        elif choice == _FLOAT_TYPE:
            array.append(round(random.uniform(-100.0, 100.0), 3))
        elif choice == _STRING_TYPE:
            array.append(_random_string(random.randint(5, 30)))
        elif choice == _BOOL_TYPE:
            array.append(random.choice([True, False]))
        elif choice == _NULL_TYPE:
            array.append(None)
        else:
            array.append({"index": i, "value": _random_string(10)})

    return json.dumps(array)


def _generate_number_heavy() -> str:
    """Generates an array of integers, decimals and exponent forms."""
    numbers: list[str] = []
    for _ in range(1000):
        numbers.append(str(random.randint(-(10**12), 10**12)))
        numbers.append(f"{random.uniform(-1e6, 1e6):.6f}")
        mantissa = random.uniform(1, 10)
        numbers.append(f"{mantissa:.3f}e{random.randint(-30, 30)}")
    return "[" + ",".join(numbers) + "]"


def _generate_nested_structure() -> str:
    """Generates a JSON structure nested well below the default depth limit."""

    def create_nested_dict(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"value": _random_string(10)}

        return {
            "level": depth,
            "items": [create_nested_dict(depth - 1) for _ in range(2)],
            "nested": create_nested_dict(depth - 1),
        }

    return json.dumps(create_nested_dict(7))


def _generate_string_heavy() -> str:
    """Generates JSON whose strings are dense with escape sequences."""

    def create_escaped_string() -> str:
        chars = []
        for _ in range(50):
            if random.random() < _ESCAPE_PROBABILITY:
                chars.append(
                    random.choice(
                        ['\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\t"]
                    )
                )
            else:
                chars.append(
                    random.choice(string.ascii_letters + string.digits + " ")
                )
        return "".join(chars)

    items = [f'"{create_escaped_string()}"' for _ in range(100)]
    items += [
        f'"\\u{random.randint(0x0100, 0x07FF):04x} \\ud83d\\ude00"'
        for _ in range(50)
    ]
    return "[" + ",".join(items) + "]"


def _random_string(length: int) -> str:
    """Generates a random string of specified length."""
    return "".join(random.choices(string.ascii_letters, k=length))
