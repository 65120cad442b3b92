"""
Audit Logging Signals

Writes the audit trail from the allocation engine's outbound events.
Both events arrive after commit, so only persisted changes are logged.
"""

from django.dispatch import receiver

from occupancy.models import TenantAssignment
from occupancy.signals import tenant_assigned, tenant_removed
from audit.helpers import log_tenant_assignment, log_tenant_transfer, log_tenant_removal


@receiver(tenant_assigned, sender=TenantAssignment)
def log_assigned(sender, assignment, performed_by=None, transfer=False, **kwargs):
    if not transfer:
        log_tenant_assignment(assignment, user=performed_by)
        return

    previous = (
        TenantAssignment.objects.ended()
        .for_tenant(assignment.tenant_id)
        .select_related('bed__room')
        .order_by('-updated_at', '-id')
        .first()
    )
    if previous:
        log_tenant_transfer(assignment, previous, user=performed_by)
    else:
        log_tenant_assignment(assignment, user=performed_by)


@receiver(tenant_removed, sender=TenantAssignment)
def log_removed(sender, assignment, performed_by=None, transfer=False, **kwargs):
    # A transfer is logged once, from the assignment side
    if not transfer:
        log_tenant_removal(assignment, user=performed_by)
