"""Validators and processors referenced by dotted path from test configs."""

processed: list = []


def is_port(value: str) -> bool:
    return value is not None and value.isdigit() and 0 < int(value) < 65536


def record(value) -> None:
    processed.append(value)
