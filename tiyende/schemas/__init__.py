from tiyende.schemas.activity import Activity, ActivityCreate
from tiyende.schemas.dashboard import DashboardStats
from tiyende.schemas.route import Route, RouteCreate, RouteUpdate
from tiyende.schemas.setting import Setting, SettingValue
from tiyende.schemas.ticket import Ticket, TicketCreate, TicketStatus, TicketUpdate
from tiyende.schemas.user import User, UserCreate, UserResponse, UserRole, UserUpdate
from tiyende.schemas.vendor import Vendor, VendorCreate, VendorStatus, VendorUpdate
