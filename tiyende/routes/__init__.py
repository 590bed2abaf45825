# ── Auth & users ──────────────────────────────────────────────
from tiyende.routes.auth_router import router as auth_router
from tiyende.routes.user_router import router as user_router

# ── Operators & network ───────────────────────────────────────
from tiyende.routes.vendor_router import router as vendor_router
from tiyende.routes.route_router import router as route_router

# ── Bookings ──────────────────────────────────────────────────
from tiyende.routes.ticket_router import router as ticket_router

# ── Configuration ─────────────────────────────────────────────
from tiyende.routes.setting_router import router as setting_router

# ── Observability & reporting ─────────────────────────────────
from tiyende.routes.activity_router import router as activity_router
from tiyende.routes.dashboard_router import router as dashboard_router
