import uuid


def generate_id() -> str:
    """Generate a new opaque identifier for connections and tools."""
    return uuid.uuid4().hex
