# micafe/utils/audit.py
from fastapi import Request

from micafe.database import Database
from micafe.models.log import Log

def client_ip(request: Request):
    return request.client.host if request and request.client else None

def write_log(db: Database, *, user_id, action, resource, status="SUCCESS", ip=None, meta=None):
    entry = Log(id=len(db.logs) + 1, ts=db.clock(), user_id=user_id, action=action, resource=resource,
                status=status, ip=ip, meta=meta or {})
    db.logs.append(entry)
    return entry
