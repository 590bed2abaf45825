from tiyende.crud.activity import ActivityLog
from tiyende.crud.route import CRUDRoute
from tiyende.crud.setting import CRUDSetting
from tiyende.crud.ticket import CRUDTicket
from tiyende.crud.user import CRUDUser
from tiyende.crud.vendor import CRUDVendor
