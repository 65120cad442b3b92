"""
Outbound allocation events.

Sent only after the ledger change has committed, so receivers (billing,
audit) never see work that was rolled back.

tenant_assigned kwargs:
    assignment, tenant_id, room_id, bed_id, check_in_date, performed_by, transfer
tenant_removed kwargs:
    assignment, tenant_id, room_id, bed_id, end_date, performed_by, transfer
"""
from django.dispatch import Signal

tenant_assigned = Signal()
tenant_removed = Signal()
