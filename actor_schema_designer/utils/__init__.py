from typing import Any, Dict, List


def as_mapping(value: Any) -> Dict[str, Any]:
    """Return ``value`` if it is a mapping, else an empty dict.

    Every optional section of the unified config goes through this, so an absent
    or malformed section is indistinguishable from an empty one.
    """
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def section(config: Any, *keys: str) -> Dict[str, Any]:
    """Walk nested mapping keys, defaulting every missing level to ``{}``."""
    current = as_mapping(config)
    for key in keys:
        current = as_mapping(current.get(key))
    return current
