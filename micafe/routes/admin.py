# micafe/routes/admin.py
from fastapi import APIRouter, Depends, Query
from typing import Optional, Literal

from micafe.config import settings
from micafe.database import Database, get_db
from micafe.models.users import Role, User
from micafe.routes.orders import order_to_out
from micafe.schemas.reports import DashboardOut
from micafe.schemas.user import PaginatedUsersResponse, UserResponse
from micafe.services.orders import recent_orders, sales_summary
from micafe.services.pricing import to_display
from micafe.utils.tokenJWT import role_required

router = APIRouter(tags=["Admin"])

admin_only = role_required(Role.ADMIN)


# Sales figures for the admin dashboard
@router.get("/admin/dashboard", response_model=DashboardOut)
def dashboard(db: Database = Depends(get_db), current_user: User = Depends(admin_only)):
    summary = sales_summary(db)
    return DashboardOut(
        total_sales=to_display(summary.total_sales),
        order_count=summary.order_count,
        completed_count=summary.completed_count,
        pending_count=summary.pending_count,
        recent_orders=[order_to_out(o) for o in recent_orders(db, limit=settings.DASHBOARD_RECENT_ORDERS)],
    )


# Retrieve a list of users with filtering, sorting, and pagination (Admin only)
@router.get("/users", response_model=PaginatedUsersResponse)
def get_all_users(
    q: Optional[str] = Query(None, description="Search by email"),
    role: Optional[Role] = Query(None, description="Filter by role"),
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    sort_by: Literal["id", "email", "role", "name"] = "id",
    order: Literal["asc", "desc"] = "asc",
    db: Database = Depends(get_db),
    current_user: User = Depends(admin_only),
):
    users = db.users

    # Filter by email
    if q:
        users = [u for u in users if q.lower() in u.email.lower()]

    # Filter by role
    if role:
        users = [u for u in users if u.role == role]

    # Ids are "u<n>"; sort them numerically
    if sort_by == "id":
        key = lambda u: int(u.id[1:]) if u.id[1:].isdigit() else 0
    else:
        key = lambda u: str(getattr(u, sort_by))
    users = sorted(users, key=key, reverse=(order == "desc"))

    # Apply pagination
    total = len(users)
    rows = users[(page - 1) * page_size: page * page_size]

    return {
        "items": [UserResponse.model_validate(u) for u in rows],
        "total": total,
        "page": page,
        "page_size": page_size,
    }
