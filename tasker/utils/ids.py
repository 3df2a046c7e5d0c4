"""
ids.py - task id generation
Single responsibility: build opaque, practically unique task ids.
"""
import time
import uuid


def new_id() -> str:
    """Millisecond timestamp followed by 12 random hex characters."""
    return f"{int(time.time() * 1000)}{uuid.uuid4().hex[:12]}"
