# micafe/models/log.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional


# Represents system audit logs tracking user actions and events
@dataclass
class Log:
    id: int
    ts: datetime
    user_id: Optional[str]
    action: str
    resource: str
    status: str
    ip: Optional[str] = None

    # Flexible context data
    meta: Dict[str, Any] = field(default_factory=dict)
