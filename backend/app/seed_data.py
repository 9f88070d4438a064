"""
Demo collections loaded into the store at startup.

Each function builds fresh records on every call so a reset store never
shares objects with a previous one.
"""
from datetime import date, datetime, timezone
from typing import List

from app.models.enums import (
    BatchPriority,
    BatchStatus,
    InspectionStatus,
    LineStatus,
    LineType,
    OrderStatus,
    PermissionGroup,
    StageStatus,
    TaskStatus,
    UserStatus,
)
from app.models.inventory import InventoryItem
from app.models.product import (
    BOMItemDefinition,
    CustomField,
    InspectionChecklistItem,
    ProcessStageDefinition,
    ProductDefinition,
    StageParameter,
)
from app.models.production import BatchLogEntry, ProductionBatch, ProductionStage
from app.models.purchase_order import PurchaseOrder
from app.models.quality import Inspection, InspectionItem
from app.models.schedule import ProductionLine, ScheduleTask
from app.models.user import Permission, Role, User


def _utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def inventory_items() -> List[InventoryItem]:
    rows = [
        ("inv-1", "STL-SHEET-04", "Steel Sheet 4mm", "Raw Materials", 1240, 200, "sheets", 45.00, 2000),
        ("inv-2", "BOLT-HEX-M8", "M8 Hex Bolt", "Hardware", 450, 0, "pcs", 0.15, 2000),
        ("inv-3", "ELEC-CIRC-V2", "Circuit Board v2", "Electronics", 12, 10, "units", 120.00, 100),
        ("inv-4", "PKG-BOX-L", "Large Cardboard Box", "Packaging", 4200, 500, "pcs", 1.50, 5000),
        ("inv-5", "PNT-IND-BLK", "Industrial Paint (Black)", "Consumables", 25, 20, "L", 85.00, 200),
        ("inv-6", "RUB-SEAL-22", "Rubber Seal 22mm", "Hardware", 800, 150, "pcs", 2.20, 1000),
        ("inv-7", "ALU-PROF-20", "Aluminum Profile 2020", "Raw Materials", 150, 120, "m", 12.50, 500),
        ("inv-8", "HYD-VALVE-X", "Hydraulic Valve Type X", "Components", 65, 5, "units", 240.00, 100),
    ]
    return [
        InventoryItem(
            id=id_, sku=sku, name=name, category=category, stock=stock,
            allocated=allocated, unit=unit, value=value, max_stock=max_stock,
        )
        for id_, sku, name, category, stock, allocated, unit, value, max_stock in rows
    ]


def products() -> List[ProductDefinition]:
    return [
        ProductDefinition(
            id="prod-1",
            sku="HYD-PUMP-X1",
            name="Hydraulic Pump X1",
            description="High pressure hydraulic pump for industrial applications.",
            version="1.2",
            last_modified=date(2024, 3, 10),
            bom=[
                BOMItemDefinition(id="b1", inventory_item_id="inv-1", inventory_item_name="Steel Sheet 4mm", quantity=2, unit="sheets"),
                BOMItemDefinition(id="b2", inventory_item_id="inv-2", inventory_item_name="M8 Hex Bolt", quantity=12, unit="pcs"),
                BOMItemDefinition(id="b3", inventory_item_id="inv-6", inventory_item_name="Rubber Seal 22mm", quantity=4, unit="pcs"),
            ],
            stages=[
                ProcessStageDefinition(
                    id="st1", name="Material Cutting", description="Cut steel sheets to size", order=1,
                    parameters=[StageParameter(id="p1", name="Tolerance", target_value="±0.5mm")],
                ),
                ProcessStageDefinition(
                    id="st2", name="Assembly A", description="Assemble main housing", order=2,
                    parameters=[StageParameter(id="p2", name="Torque", target_value="25Nm")],
                ),
                ProcessStageDefinition(
                    id="st3", name="Painting", description="Apply protective coating", order=3,
                    parameters=[
                        StageParameter(id="p3", name="Color", target_value="Matte Black"),
                        StageParameter(id="p4", name="Coats", target_value="2"),
                    ],
                ),
            ],
            checklist=[
                InspectionChecklistItem(id="c1", label="Surface finish free of scratches/dents", category="Visual"),
                InspectionChecklistItem(id="c2", label="Color consistency matches master sample", category="Visual"),
                InspectionChecklistItem(id="c3", label="Pressure test @ 100psi", category="Functional"),
                InspectionChecklistItem(id="c4", label="Piston movement smooth", category="Functional"),
            ],
            custom_fields=[
                CustomField(key="Weight", value="4.5kg"),
                CustomField(key="Material Grade", value="316L"),
            ],
        ),
        ProductDefinition(
            id="prod-2",
            sku="ELEC-CIRC-V2",
            name="Circuit Board v2",
            description="Main control unit for Z-series automation.",
            version="2.0",
            last_modified=date(2024, 3, 12),
            bom=[
                BOMItemDefinition(id="b4", inventory_item_id="inv-3", inventory_item_name="Circuit Board v2", quantity=1, unit="units"),
                BOMItemDefinition(id="b5", inventory_item_id="inv-4", inventory_item_name="Large Cardboard Box", quantity=1, unit="pcs"),
            ],
            stages=[
                ProcessStageDefinition(id="st4", name="PCB Inspection", description="Visual check of soldering", order=1),
                ProcessStageDefinition(
                    id="st5", name="Firmware Flash", description="Upload v2.0 firmware", order=2,
                    parameters=[StageParameter(id="p5", name="Version", target_value="2.0.4")],
                ),
                ProcessStageDefinition(
                    id="st6", name="Final Testing", description="Run diagnostic suite", order=3,
                    parameters=[StageParameter(id="p6", name="Pass Score", target_value="98%")],
                ),
            ],
            checklist=[
                InspectionChecklistItem(id="c5", label="Soldering joints inspection", category="Visual"),
                InspectionChecklistItem(id="c6", label="Component placement verification", category="Visual"),
                InspectionChecklistItem(id="c7", label="Power-on self test (POST)", category="Functional"),
                InspectionChecklistItem(id="c8", label="Firmware version verification", category="Functional"),
                InspectionChecklistItem(id="c9", label="ESD Packaging secure", category="Packaging"),
            ],
            custom_fields=[
                CustomField(key="Input Voltage", value="24V DC"),
                CustomField(key="IP Rating", value="IP67"),
            ],
        ),
    ]


def purchase_orders() -> List[PurchaseOrder]:
    return [
        PurchaseOrder(id="PO-2024-001", customer="Acme Corp", product="Hydraulic Pump X1", sku="HYD-PUMP-X1",
                      total_qty=5000, fulfilled_qty=0, status=OrderStatus.PENDING, progress=10, due_date=date(2024, 6, 15)),
        PurchaseOrder(id="PO-2024-002", customer="Stark Ind", product="Hydraulic Pump X1", sku="HYD-PUMP-X1",
                      total_qty=1000, fulfilled_qty=0, status=OrderStatus.ALLOCATED, progress=35, due_date=date(2024, 4, 20)),
        PurchaseOrder(id="PO-2024-003", customer="Tech Solutions", product="Circuit Board v2", sku="ELEC-CIRC-V2",
                      total_qty=500, fulfilled_qty=100, status=OrderStatus.PRODUCTION, progress=60, due_date=date(2024, 5, 1)),
        PurchaseOrder(id="PO-2024-004", customer="Cyberdyne", product="Neural Chipset", sku="NEUR-CHIP-01",
                      total_qty=250, fulfilled_qty=0, status=OrderStatus.QA, progress=90, due_date=date(2024, 4, 10)),
        PurchaseOrder(id="PO-2024-005", customer="Massive Dynamic", product="Sensor Array", sku="SENS-ARR-04",
                      total_qty=120, fulfilled_qty=120, status=OrderStatus.DONE, progress=100, due_date=date(2024, 4, 1)),
    ]


def production_batches() -> List[ProductionBatch]:
    return [
        ProductionBatch(
            id="BATCH-1001",
            po_id="PO-2024-003",
            customer="Tech Solutions",
            product="Circuit Board v2",
            sku="ELEC-CIRC-V2",
            quantity=100,
            completed_qty=45,
            status=BatchStatus.ACTIVE,
            priority=BatchPriority.HIGH,
            start_date=date(2024, 3, 10),
            stages=[
                ProductionStage(id="s1", name="PCB Etching", status=StageStatus.COMPLETED,
                                assignee="Auto-Machine 1", completed_at=_utc(2024, 3, 10, 14, 15)),
                ProductionStage(id="s2", name="Component Mount", status=StageStatus.ACTIVE, assignee="Line 2"),
                ProductionStage(id="s3", name="Soldering", status=StageStatus.PENDING, assignee="Line 2"),
                ProductionStage(id="s4", name="Firmware Load", status=StageStatus.PENDING, assignee="Tech A"),
            ],
            logs=[
                BatchLogEntry(time=_utc(2024, 3, 10, 14, 15), message="PCB Etching completed", sub="System"),
                BatchLogEntry(time=_utc(2024, 3, 10, 10, 0), message="Batch started", sub="Auto-Machine 1"),
            ],
        )
    ]


def default_checklist() -> List[InspectionItem]:
    return [
        InspectionItem(id="c1", label="General visual inspection", category="Visual"),
        InspectionItem(id="c2", label="Packaging integrity check", category="Packaging"),
    ]


def inspections() -> List[Inspection]:
    rows = [
        ("INS-2024-884", "BATCH-1001", "Circuit Board v2", "ELEC-CIRC-V2", "Sarah J.", date(2024, 3, 12), InspectionStatus.PASS, 100, 2),
        ("INS-2024-883", "BATCH-0998", "Hydraulic Pump X1", "HYD-PUMP-X1", "Mike R.", date(2024, 3, 11), InspectionStatus.FAIL, 65, 4),
        ("INS-2024-882", "BATCH-0995", "Steel Housing", "STL-SHEET-04", "Sarah J.", date(2024, 3, 10), InspectionStatus.PASS, 100, 0),
        ("INS-2024-881", "BATCH-0992", "Circuit Board v2", "ELEC-CIRC-V2", "Auto-Vision", date(2024, 3, 9), InspectionStatus.CONDITIONAL, 85, 1),
    ]
    return [
        Inspection(
            id=id_, batch_id=batch_id, product=product, sku=sku, inspector=inspector,
            date=day, status=status, score=score, images=images,
        )
        for id_, batch_id, product, sku, inspector, day, status, score, images in rows
    ]


def production_lines() -> List[ProductionLine]:
    return [
        ProductionLine(id="L1", name="CNC Milling Stn 1", type=LineType.MACHINING),
        ProductionLine(id="L2", name="CNC Milling Stn 2", type=LineType.MACHINING),
        ProductionLine(id="L3", name="Assembly Line Alpha", type=LineType.ASSEMBLY),
        ProductionLine(id="L4", name="Assembly Line Beta", type=LineType.ASSEMBLY, status=LineStatus.MAINTENANCE),
        ProductionLine(id="L5", name="Paint Booth A", type=LineType.ASSEMBLY),
        ProductionLine(id="L6", name="Pack & Ship Unit", type=LineType.PACKAGING),
    ]


def schedule_tasks() -> List[ScheduleTask]:
    return [
        ScheduleTask(id="t1", batch_id="BATCH-1001", product="Circuit Board v2", sku="ELEC-CIRC", line_id="L3",
                     start_date=date(2024, 3, 11), end_date=date(2024, 3, 13), progress=65,
                     status=TaskStatus.ACTIVE, assignees=["SJ"]),
        ScheduleTask(id="t2", batch_id="BATCH-1002", product="Hydraulic Pump X1", sku="HYD-PUMP", line_id="L1",
                     start_date=date(2024, 3, 10), end_date=date(2024, 3, 14), progress=40,
                     status=TaskStatus.DELAYED, assignees=["MR", "RT"]),
        ScheduleTask(id="t3", batch_id="BATCH-1003", product="Steel Housing", sku="STL-SHEET", line_id="L2",
                     start_date=date(2024, 3, 12), end_date=date(2024, 3, 12)),
        ScheduleTask(id="t4", batch_id="BATCH-1001", product="Circuit Board v2", sku="ELEC-CIRC", line_id="L6",
                     start_date=date(2024, 3, 14), end_date=date(2024, 3, 15)),
        ScheduleTask(id="t5", batch_id="BATCH-0999", product="Old Gen Pump", sku="PUMP-OLD", line_id="L5",
                     start_date=date(2024, 3, 8), end_date=date(2024, 3, 11), progress=100,
                     status=TaskStatus.COMPLETED, assignees=["JD"]),
    ]


def permissions() -> List[Permission]:
    return [
        Permission(id="p1", group=PermissionGroup.MANUFACTURING, label="Manage Production"),
        Permission(id="p2", group=PermissionGroup.MANUFACTURING, label="Execute Tasks"),
        Permission(id="p3", group=PermissionGroup.INVENTORY, label="Manage Stock"),
        Permission(id="p4", group=PermissionGroup.INVENTORY, label="View Stock"),
        Permission(id="p5", group=PermissionGroup.QUALITY, label="Perform Inspections"),
        Permission(id="p6", group=PermissionGroup.ADMIN, label="Manage Users"),
        Permission(id="p7", group=PermissionGroup.ADMIN, label="Billing & Settings"),
    ]


def roles() -> List[Role]:
    return [
        Role(id="r1", name="Admin", description="Full access to all resources and settings.",
             permissions=["p1", "p2", "p3", "p4", "p5", "p6", "p7"]),
        Role(id="r2", name="Plant Manager", description="Can manage production, orders, and inventory.",
             permissions=["p1", "p2", "p3", "p4"]),
        Role(id="r3", name="Operator", description="Can view and update production tasks.",
             permissions=["p2", "p4"]),
        Role(id="r4", name="Viewer", description="Read-only access to dashboards.", permissions=["p4"]),
    ]


def users() -> List[User]:
    return [
        User(id="u1", name="John Doe", email="john@factoryflow.com", role="Admin",
             status=UserStatus.ACTIVE, last_active="Just now", avatar="JD"),
        User(id="u2", name="Sarah Jenkins", email="sarah@factoryflow.com", role="Plant Manager",
             status=UserStatus.ACTIVE, last_active="2 hours ago", avatar="SJ"),
        User(id="u3", name="Mike Ross", email="mike@factoryflow.com", role="Operator",
             status=UserStatus.ACTIVE, last_active="5 mins ago", avatar="MR"),
        User(id="u4", name="Emily Blunt", email="emily@factoryflow.com", role="Operator",
             status=UserStatus.INVITED, last_active="-", avatar="EB"),
        User(id="u5", name="David Kim", email="david@factoryflow.com", role="Viewer",
             status=UserStatus.SUSPENDED, last_active="3 days ago", avatar="DK"),
    ]


PRODUCTION_OUTPUT = [
    {"name": "Mon", "output": 400, "defects": 24},
    {"name": "Tue", "output": 300, "defects": 13},
    {"name": "Wed", "output": 550, "defects": 48},
    {"name": "Thu", "output": 450, "defects": 30},
    {"name": "Fri", "output": 600, "defects": 20},
]

INVENTORY_LEVELS = [
    {"name": "Steel", "stock": 80},
    {"name": "Plastic", "stock": 45},
    {"name": "Elec", "stock": 20},
    {"name": "Paint", "stock": 90},
]
