"""
propdash/domain/pool.py

Pool module kinds: access passes, maintenance tasks, rented services.
Ids here are counters (1, 2, 3 ...), never reused after a delete.
"""
from typing import Any, Dict

from propcore.engine import LifecycleConfig
from propcore.validation import MinLength, Text, Numeric, OneOf, DateValue, DateAfter
from propcore.views import rank_table
from propdash.config import Settings
from propdash.domain.kinds import EntityKind
from propdash.models.enums import (
    PoolAccessStatus, AccessType, MaintenanceStatus, MaintenanceType, MaintenancePriority,
    PoolServiceStatus, PoolServiceType, values_of,
)
from propdash.models.records import PoolAccess, MaintenanceTask, PoolService


# ============== Access ==============

POOL_ACCESS = EntityKind(
    name="pool_access",
    label="Pool access",
    module="pool",
    path="access",
    record_class=PoolAccess,
    lifecycle=LifecycleConfig(
        name="pool_access",
        states=values_of(PoolAccessStatus),
        initial_state=PoolAccessStatus.PENDING.value,
        stamped_fields={PoolAccessStatus.ACTIVE.value: "entered_at"},
    ),
    rules=(
        MinLength("name", 2, "Name is required"),
        OneOf("access_type", values_of(AccessType)),
        DateValue("start_date", "Start date is required"),
        DateAfter("end_date", "start_date", allow_equal=True, optional=True),
        Numeric("party_size", minimum=1, maximum=10, integer=True),
    ),
    display_field="name",
    filter_fields={"access_type": values_of(AccessType), "status": values_of(PoolAccessStatus)},
    search_fields=("name",),
    id_strategy="counter",
    newest_first=True,
)


# ============== Maintenance ==============

MAINTENANCE = EntityKind(
    name="maintenance",
    label="Maintenance task",
    module="pool",
    path="maintenance",
    record_class=MaintenanceTask,
    lifecycle=LifecycleConfig(
        name="maintenance",
        states=values_of(MaintenanceStatus),
        initial_state=MaintenanceStatus.PLANNED.value,
        stamped_fields={MaintenanceStatus.COMPLETED.value: "completed_at"},
    ),
    rules=(
        OneOf("task_type", values_of(MaintenanceType)),
        MinLength("description", 5, "Description is required"),
        OneOf("priority", values_of(MaintenancePriority)),
        DateValue("scheduled_date", "Scheduled date is required"),
        MinLength("assignee", 2, "Assignee is required"),
        Text("notes"),
    ),
    display_field="description",
    filter_fields={"status": values_of(MaintenanceStatus), "task_type": values_of(MaintenanceType)},
    search_fields=("description", "assignee"),
    rank_field="priority",
    ranks=rank_table(*values_of(MaintenancePriority)),
    id_strategy="counter",
    newest_first=True,
    on_create=lambda now: {"created_at": now},
)


# ============== Services ==============

def service_price(values: Dict[str, Any], settings: Settings) -> Dict[str, Any]:
    """Price = unit price of the service type x quantity."""
    unit = settings.POOL_SERVICE_PRICES.get(values["service_type"], 0)
    return {"price": unit * values["quantity"]}


POOL_SERVICE = EntityKind(
    name="pool_service",
    label="Pool service",
    module="pool",
    path="services",
    record_class=PoolService,
    lifecycle=LifecycleConfig(
        name="pool_service",
        states=values_of(PoolServiceStatus),
        initial_state=PoolServiceStatus.ACTIVE.value,
    ),
    rules=(
        OneOf("service_type", values_of(PoolServiceType)),
        MinLength("client", 2, "Client name is required"),
        Numeric("quantity", minimum=1, integer=True),
        Text("location"),
        Text("notes"),
    ),
    display_field="client",
    filter_fields={"service_type": values_of(PoolServiceType), "status": values_of(PoolServiceStatus)},
    search_fields=("client", "location"),
    id_strategy="counter",
    newest_first=True,
    derive=service_price,
    on_create=lambda now: {"requested_at": now},
)


POOL_KINDS = (POOL_ACCESS, MAINTENANCE, POOL_SERVICE)
