"""JSON output formatter for CLI."""

import json
import sys
from decimal import Decimal
from enum import Enum as _Enum
from typing import Any, Dict, List, Optional, TextIO

from ...models import ShippingZone, round_money


def _default_serializer(obj: Any) -> Any:
    """Serialize otherwise non-JSON-serializable objects.

    - Decimal -> string, so amounts keep their exact digits
    - Enum -> value (fallback to name)
    - Fallback -> str(obj)
    """
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, _Enum):
        return getattr(obj, "value", obj.name)
    return str(obj)


def format_json(data: Any, output: Optional[TextIO] = None, indent: int = 2) -> None:
    """Format data as JSON and write to output.

    Args:
        data: Data to format
        output: Output stream (defaults to stdout)
        indent: JSON indentation level
    """
    if output is None:
        output = sys.stdout

    json.dump(
        data,
        output,
        indent=indent,
        ensure_ascii=False,
        sort_keys=True,
        default=_default_serializer,
    )
    output.write("\n")


def format_zones_json(zones: List[ShippingZone], default_cost: Decimal) -> Dict[str, Any]:
    """Format a zone table for JSON output, sorted by city."""
    sorted_zones = [
        {"city": z.city, "cost": str(round_money(z.cost)), "delivery_days": z.delivery_days}
        for z in sorted(zones, key=lambda z: z.city)
    ]
    return {"zones": sorted_zones, "default_cost": str(round_money(default_cost)), "count": len(zones)}
