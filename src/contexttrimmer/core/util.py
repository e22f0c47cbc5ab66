"""Small utility functions."""

import json
from typing import Any

def safe_json(obj: Any, indent: int = 2) -> str:
    """Serialize results to JSON, handling numpy types and dataclasses."""
    def serialize_item(item):
        if hasattr(item, 'item'):  # numpy scalar
            return item.item()
        elif hasattr(item, 'tolist'):  # numpy array
            return item.tolist()
        elif hasattr(item, '__dict__'):  # dataclass or object
            return {k: serialize_item(v) for k, v in item.__dict__.items()}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    return json.dumps(serialize_item(obj), indent=indent, ensure_ascii=False)
