"""
Demo data: four computers and their preventive maintenance history.

Records go through the maintenance component, so every computer's
schedule is derived exactly as it would be for user-entered work.
Running the seed twice is a no-op for assets that already exist.
"""

import logging
from typing import Any

from maintrack.adapters.clock import SystemClock
from maintrack.adapters.sqlite.repos import SQLiteEquipmentRepo, SQLiteMaintenanceRepo
from maintrack.components.equipment import CreateEquipmentInput, run_create
from maintrack.components.maintenance import RecordMaintenanceInput, run_record
from maintrack.rules.models import Rules

logger = logging.getLogger(__name__)

DEMO_EQUIPMENT: list[dict[str, Any]] = [
    {
        "id": "CPU001",
        "name": "Accounting-PC01",
        "os": "Windows 10 Pro",
        "type": "Desktop CPU",
        "common_failure_points": "Power supply, Hard drive, Overheating from dust",
        "processor": "Intel Core i5-8500",
        "ram_amount": "8GB",
        "storage_capacity": "256GB SSD + 1TB HDD",
    },
    {
        "id": "CPU002",
        "name": "Design-PC01",
        "os": "Windows 11 Pro",
        "type": "Workstation CPU",
        "common_failure_points": "Graphics card, Overheating, RAM errors",
        "processor": "Intel Core i7-12700K",
        "ram_amount": "32GB",
        "storage_capacity": "1TB",
        "storage_type": "NVMe SSD",
    },
    {
        "id": "CPU003",
        "name": "Reception-PC",
        "os": "Windows 10 Home",
        "type": "Desktop CPU",
        "common_failure_points": "Overheating from dust, Slow boot failures",
        "processor": "AMD Ryzen 3 3200G",
        "ram_amount": "8GB",
        "storage_capacity": "128GB",
        "storage_type": "SSD",
    },
    {
        "id": "LAP001",
        "name": "Management-Laptop",
        "os": "macOS Sonoma",
        "type": "Laptop",
        "common_failure_points": "Battery, Keyboard, Overheating",
        "processor": "Apple M2 Pro",
        "ram_amount": "16GB",
        "storage_capacity": "512GB",
        "storage_type": "SSD",
    },
]

DEMO_RECORDS: list[dict[str, str]] = [
    {
        "asset_id": "CPU001",
        "date": "2024-01-15",
        "technician": "Ana Lopez",
        "description": "Internal component cleaning, fan check, antivirus update.",
    },
    {
        "asset_id": "CPU001",
        "date": "2023-07-10",
        "technician": "Ana Lopez",
        "description": "OS format and reinstall, data backup.",
    },
    {
        "asset_id": "CPU002",
        "date": "2023-11-20",
        "technician": "Carlos Ruiz",
        "description": "Graphics card cleaning, CPU thermal paste replacement, stress test.",
    },
    {
        "asset_id": "CPU003",
        "date": "2024-03-01",
        "technician": "Sofia Martin",
        "description": "General cleaning, startup optimization, malware scan.",
    },
    {
        "asset_id": "LAP001",
        "date": "2024-02-10",
        "technician": "Miguel Chan",
        "description": "Keyboard and screen cleaning, battery health check, macOS update.",
    },
]


def seed_demo_data(db_path: str, rules: Rules) -> tuple[int, int]:
    """Insert the demo computers and records. Returns (equipment_added, records_added)."""
    equipment_repo = SQLiteEquipmentRepo(db_path)
    maintenance_repo = SQLiteMaintenanceRepo(db_path)
    clock = SystemClock()

    added: set[str] = set()
    for data in DEMO_EQUIPMENT:
        result = run_create(
            CreateEquipmentInput(data=data), repo=equipment_repo, time=clock, limits=rules.assets
        )
        if result.success:
            added.add(data["id"])
        else:
            logger.info("Skipping %s: %s", data["id"], result.errors[0].message)

    records = 0
    for rec in DEMO_RECORDS:
        if rec["asset_id"] not in added:
            continue
        result = run_record(
            RecordMaintenanceInput(asset_kind="equipment", **rec),
            repo=maintenance_repo,
            assets=equipment_repo,
            time=clock,
            rules=rules.maintenance,
        )
        if not result.success:
            raise RuntimeError(f"Seed record for {rec['asset_id']} failed: {result.errors}")
        records += 1

    logger.info("Seeded %d computers and %d maintenance records", len(added), records)
    return len(added), records
