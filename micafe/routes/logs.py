# micafe/routes/logs.py
from fastapi import APIRouter, Depends, Query
from typing import List, Optional, Any
from datetime import datetime
from pydantic import BaseModel

from micafe.database import Database, get_db
from micafe.models.users import Role, User
from micafe.utils.tokenJWT import role_required

router = APIRouter(prefix="/logs", tags=["Logs"])

# --- SCHEMAS ---
class LogResponse(BaseModel):
    id: int
    user_id: Optional[str] = None
    action: str
    resource: str
    status: str
    ip: Optional[str] = None
    ts: datetime
    meta: Optional[Any] = None

    class Config:
        from_attributes = True

class LogPage(BaseModel):
    items: List[LogResponse]
    total: int
    page: int
    page_size: int

# --- ENDPOINT ---
@router.get("", response_model=LogPage)
def get_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    action: Optional[str] = Query(None, description="Filter by action"),
    user_id: Optional[str] = Query(None, description="Filter by user id"),
    resource: Optional[str] = Query(None, description="Filter by resource"),
    status: Optional[str] = Query(None, description="Filter by status (SUCCESS/FAIL)"),
    db: Database = Depends(get_db),
    current_user: User = Depends(role_required(Role.ADMIN)),
):
    logs = db.logs

    if action:
        logs = [entry for entry in logs if action.upper() in entry.action]
    if user_id is not None:
        logs = [entry for entry in logs if entry.user_id == user_id]
    if resource:
        logs = [entry for entry in logs if resource.lower() in entry.resource]
    if status:
        logs = [entry for entry in logs if entry.status == status.upper()]

    # Newest first; ids break ties between entries with the same timestamp
    logs = sorted(logs, key=lambda entry: (entry.ts, entry.id), reverse=True)

    total = len(logs)
    rows = logs[(page - 1) * page_size: page * page_size]

    return {
        "items": [LogResponse.model_validate(entry) for entry in rows],
        "total": total,
        "page": page,
        "page_size": page_size,
    }
