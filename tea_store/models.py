from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TeaOrder:
    id: int
    name: Optional[Any] = None
    price: Optional[Any] = None
