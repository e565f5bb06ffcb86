from typing import Any, Dict, Optional, Sequence


def first_issue(errors: Sequence[Dict[str, Any]]) -> Optional[str]:
    """Message of the first validation issue, or None when there is none."""
    if not errors:
        return None
    return errors[0].get("msg")
