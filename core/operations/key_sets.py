from typing import Any, Dict, List


def union_keys(a: Dict[str, Any], b: Dict[str, Any]) -> List[str]:
    """Sorted keys present in either record."""
    return sorted(set(a) | set(b))


def intersect_keys(a: Dict[str, Any], b: Dict[str, Any]) -> List[str]:
    """Sorted keys present in both records."""
    return sorted(set(a) & set(b))


def difference_keys(a: Dict[str, Any], b: Dict[str, Any]) -> List[str]:
    """Sorted keys present in exactly one of the two records."""
    return sorted(set(a) ^ set(b))
