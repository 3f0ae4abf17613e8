from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Tool:
    """
    A rentable item. The Store keeps raw dicts; services hand these out.
    `available` flips to False once the tool is rented and never comes back.
    """
    tool_id: int
    name: str
    description: str
    daily_rate: Decimal  # base price per rental day
    available: bool = True
