# backend/utils/audit.py
from datetime import datetime, timezone

from models.log import Log


def write_log(store, *, user_id, action, resource, status="SUCCESS", ip=None, meta=None):
    entry = Log(
        ts=datetime.now(timezone.utc),
        user_id=user_id,
        action=action,
        resource=resource,
        status=status,
        ip=ip,
        meta=meta or {},
    )
    store.add_log(entry)
    return entry


def client_ip(request):
    if request is None or request.client is None:
        return None
    return request.client.host
