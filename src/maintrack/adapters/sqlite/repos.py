import builtins
import json
import sqlite3
from datetime import UTC, date, datetime
from typing import Any
from uuid import UUID, uuid4

from maintrack.domain.entities import (
    AssetKind,
    AttachedDevice,
    Equipment,
    MaintenanceImage,
    MaintenanceRecord,
    Peripheral,
    Ticket,
    User,
)

ATTACHED_DEVICE_FIELDS = ("mouse", "monitor", "regulator", "keyboard")


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _iso(value: date | datetime | None) -> str | None:
    return value.isoformat() if value else None


def _parse_date(s: str | None) -> date | None:
    return date.fromisoformat(s) if s else None


def _parse_dt(s: str | None) -> datetime:
    return datetime.fromisoformat(s) if s else datetime.min


class _SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def _write(self, sql: str, params: tuple[Any, ...]) -> int:
        conn = self._get_conn()
        try:
            cursor = conn.execute(sql, params)
            conn.commit()
            return cursor.rowcount
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()


class SQLiteUserRepo(_SQLiteRepo):
    def save(self, user: User) -> User:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO users (
                    id, email, display_name, password_hash, status, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    email=excluded.email,
                    display_name=excluded.display_name,
                    password_hash=excluded.password_hash,
                    status=excluded.status,
                    updated_at=excluded.updated_at
            """,
                (
                    str(user.id),
                    user.email,
                    user.display_name,
                    user.password_hash,
                    user.status,
                    user.created_at.isoformat(),
                    user.updated_at.isoformat(),
                ),
            )

            # Roles are replaced wholesale
            conn.execute("DELETE FROM role_assignments WHERE user_id = ?", (str(user.id),))
            for role in user.roles:
                conn.execute(
                    "INSERT INTO role_assignments (id, user_id, role, created_at) "
                    "VALUES (?, ?, ?, ?)",
                    (str(uuid4()), str(user.id), role, datetime.now(UTC).isoformat()),
                )

            conn.commit()
            return user
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get_by_email(self, email: str) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM users WHERE email = ?", (email,)).fetchone()
            if not row:
                return None
            return self._map_row_to_user(conn, row)
        finally:
            conn.close()

    def get_by_id(self, user_id: object) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM users WHERE id = ?", (str(user_id),)).fetchone()
            if not row:
                return None
            return self._map_row_to_user(conn, row)
        finally:
            conn.close()

    def list_all(self) -> list[User]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM users ORDER BY email").fetchall()
            return [self._map_row_to_user(conn, row) for row in rows]
        finally:
            conn.close()

    def count(self) -> int:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT COUNT(*) AS cnt FROM users").fetchone()
            return int(row["cnt"]) if row else 0
        finally:
            conn.close()

    def _map_row_to_user(self, conn: sqlite3.Connection, row: dict[str, Any]) -> User:
        role_rows = conn.execute(
            "SELECT role FROM role_assignments WHERE user_id = ? ORDER BY role", (row["id"],)
        ).fetchall()

        return User(
            id=UUID(row["id"]),
            email=row["email"],
            display_name=row["display_name"],
            password_hash=row["password_hash"],
            roles=[r["role"] for r in role_rows],
            status=row["status"],
            created_at=_parse_dt(row["created_at"]),
            updated_at=_parse_dt(row["updated_at"]),
        )


class SQLiteEquipmentRepo(_SQLiteRepo):
    def save(self, item: Equipment) -> Equipment:
        devices = {
            name: getattr(item, name).model_dump()
            for name in ATTACHED_DEVICE_FIELDS
            if getattr(item, name) is not None
        }
        self._write(
            """
            INSERT INTO equipment (
                id, name, os, type, common_failure_points,
                processor, ram_amount, ram_type, storage_capacity, storage_type, ip_address,
                user_name, patrimonial_id, attached_devices_json, pc_status, reusable_parts,
                last_maintenance_date, last_technician, next_maintenance_date,
                created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                os=excluded.os,
                type=excluded.type,
                common_failure_points=excluded.common_failure_points,
                processor=excluded.processor,
                ram_amount=excluded.ram_amount,
                ram_type=excluded.ram_type,
                storage_capacity=excluded.storage_capacity,
                storage_type=excluded.storage_type,
                ip_address=excluded.ip_address,
                user_name=excluded.user_name,
                patrimonial_id=excluded.patrimonial_id,
                attached_devices_json=excluded.attached_devices_json,
                pc_status=excluded.pc_status,
                reusable_parts=excluded.reusable_parts,
                last_maintenance_date=excluded.last_maintenance_date,
                last_technician=excluded.last_technician,
                next_maintenance_date=excluded.next_maintenance_date,
                updated_at=excluded.updated_at
        """,
            (
                item.id,
                item.name,
                item.os,
                item.type,
                item.common_failure_points,
                item.processor,
                item.ram_amount,
                item.ram_type,
                item.storage_capacity,
                item.storage_type,
                item.ip_address,
                item.user_name,
                item.patrimonial_id,
                json.dumps(devices),
                item.pc_status,
                item.reusable_parts,
                _iso(item.last_maintenance_date),
                item.last_technician,
                _iso(item.next_maintenance_date),
                item.created_at.isoformat(),
                item.updated_at.isoformat(),
            ),
        )
        return item

    def get_by_id(self, equipment_id: str) -> Equipment | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM equipment WHERE id = ?", (equipment_id,)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def list_all(self) -> builtins.list[Equipment]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM equipment ORDER BY id ASC").fetchall()
            return [self._map_row(row) for row in rows]
        finally:
            conn.close()

    def delete(self, equipment_id: str) -> None:
        self._write("DELETE FROM equipment WHERE id = ?", (equipment_id,))

    def _map_row(self, row: dict[str, Any]) -> Equipment:
        devices = json.loads(row["attached_devices_json"] or "{}")
        return Equipment(
            id=row["id"],
            name=row["name"],
            os=row["os"],
            type=row["type"],
            common_failure_points=row["common_failure_points"],
            processor=row["processor"],
            ram_amount=row["ram_amount"],
            ram_type=row["ram_type"],
            storage_capacity=row["storage_capacity"],
            storage_type=row["storage_type"],
            ip_address=row["ip_address"],
            user_name=row["user_name"],
            patrimonial_id=row["patrimonial_id"],
            pc_status=row["pc_status"],
            reusable_parts=row["reusable_parts"],
            last_maintenance_date=_parse_date(row["last_maintenance_date"]),
            last_technician=row["last_technician"],
            next_maintenance_date=_parse_date(row["next_maintenance_date"]),
            created_at=_parse_dt(row["created_at"]),
            updated_at=_parse_dt(row["updated_at"]),
            **{
                name: AttachedDevice(**devices[name])
                for name in ATTACHED_DEVICE_FIELDS
                if name in devices
            },
        )


class SQLitePeripheralRepo(_SQLiteRepo):
    def save(self, item: Peripheral) -> Peripheral:
        self._write(
            """
            INSERT INTO peripherals (
                id, name, type, common_failure_points, patrimonial_id, brand, model,
                location, status, last_maintenance_date, last_technician,
                next_maintenance_date, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                type=excluded.type,
                common_failure_points=excluded.common_failure_points,
                patrimonial_id=excluded.patrimonial_id,
                brand=excluded.brand,
                model=excluded.model,
                location=excluded.location,
                status=excluded.status,
                last_maintenance_date=excluded.last_maintenance_date,
                last_technician=excluded.last_technician,
                next_maintenance_date=excluded.next_maintenance_date,
                updated_at=excluded.updated_at
        """,
            (
                item.id,
                item.name,
                item.type,
                item.common_failure_points,
                item.patrimonial_id,
                item.brand,
                item.model,
                item.location,
                item.status,
                _iso(item.last_maintenance_date),
                item.last_technician,
                _iso(item.next_maintenance_date),
                item.created_at.isoformat(),
                item.updated_at.isoformat(),
            ),
        )
        return item

    def get_by_id(self, peripheral_id: str) -> Peripheral | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM peripherals WHERE id = ?", (peripheral_id,)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def list_all(self) -> builtins.list[Peripheral]:
        conn = self._get_conn()
        try:
            rows = conn.execute("SELECT * FROM peripherals ORDER BY id ASC").fetchall()
            return [self._map_row(row) for row in rows]
        finally:
            conn.close()

    def delete(self, peripheral_id: str) -> None:
        self._write("DELETE FROM peripherals WHERE id = ?", (peripheral_id,))

    def _map_row(self, row: dict[str, Any]) -> Peripheral:
        return Peripheral(
            id=row["id"],
            name=row["name"],
            type=row["type"],
            common_failure_points=row["common_failure_points"],
            patrimonial_id=row["patrimonial_id"],
            brand=row["brand"],
            model=row["model"],
            location=row["location"],
            status=row["status"],
            last_maintenance_date=_parse_date(row["last_maintenance_date"]),
            last_technician=row["last_technician"],
            next_maintenance_date=_parse_date(row["next_maintenance_date"]),
            created_at=_parse_dt(row["created_at"]),
            updated_at=_parse_dt(row["updated_at"]),
        )


class SQLiteMaintenanceRepo(_SQLiteRepo):
    def save(self, record: MaintenanceRecord) -> MaintenanceRecord:
        self._write(
            """
            INSERT INTO maintenance_records (
                id, asset_kind, asset_id, kind, date, technician, description,
                images_json, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                kind=excluded.kind,
                date=excluded.date,
                technician=excluded.technician,
                description=excluded.description,
                images_json=excluded.images_json,
                updated_at=excluded.updated_at
        """,
            (
                str(record.id),
                record.asset_kind,
                record.asset_id,
                record.kind,
                record.date.isoformat(),
                record.technician,
                record.description,
                json.dumps([img.model_dump() for img in record.images]),
                record.created_at.isoformat(),
                record.updated_at.isoformat(),
            ),
        )
        return record

    def get_by_id(self, record_id: UUID) -> MaintenanceRecord | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM maintenance_records WHERE id = ?", (str(record_id),)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def list_for_asset(
        self, asset_kind: AssetKind, asset_id: str
    ) -> builtins.list[MaintenanceRecord]:
        """Records for one asset, newest first."""
        conn = self._get_conn()
        try:
            rows = conn.execute(
                """
                SELECT * FROM maintenance_records
                WHERE asset_kind = ? AND asset_id = ?
                ORDER BY date DESC, created_at DESC
            """,
                (asset_kind, asset_id),
            ).fetchall()
            return [self._map_row(row) for row in rows]
        finally:
            conn.close()

    def list_in_range(self, start: date, end: date) -> builtins.list[MaintenanceRecord]:
        """Records with start <= date < end, oldest first."""
        conn = self._get_conn()
        try:
            rows = conn.execute(
                """
                SELECT * FROM maintenance_records
                WHERE date >= ? AND date < ?
                ORDER BY date ASC
            """,
                (start.isoformat(), end.isoformat()),
            ).fetchall()
            return [self._map_row(row) for row in rows]
        finally:
            conn.close()

    def delete(self, record_id: UUID) -> None:
        self._write("DELETE FROM maintenance_records WHERE id = ?", (str(record_id),))

    def delete_for_asset(self, asset_kind: AssetKind, asset_id: str) -> int:
        return self._write(
            "DELETE FROM maintenance_records WHERE asset_kind = ? AND asset_id = ?",
            (asset_kind, asset_id),
        )

    def _map_row(self, row: dict[str, Any]) -> MaintenanceRecord:
        return MaintenanceRecord(
            id=UUID(row["id"]),
            asset_kind=row["asset_kind"],
            asset_id=row["asset_id"],
            kind=row["kind"],
            date=date.fromisoformat(row["date"]),
            technician=row["technician"],
            description=row["description"],
            images=[MaintenanceImage(**img) for img in json.loads(row["images_json"] or "[]")],
            created_at=_parse_dt(row["created_at"]),
            updated_at=_parse_dt(row["updated_at"]),
        )


class SQLiteTicketRepo(_SQLiteRepo):
    def save(self, ticket: Ticket) -> Ticket:
        self._write(
            """
            INSERT INTO tickets (
                id, pc_id, pc_name, user_name, patrimonial_id, brand, model, date,
                assigned_engineer, maintenance_type, problem_description, actions_taken,
                status, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                pc_id=excluded.pc_id,
                pc_name=excluded.pc_name,
                user_name=excluded.user_name,
                patrimonial_id=excluded.patrimonial_id,
                brand=excluded.brand,
                model=excluded.model,
                date=excluded.date,
                assigned_engineer=excluded.assigned_engineer,
                maintenance_type=excluded.maintenance_type,
                problem_description=excluded.problem_description,
                actions_taken=excluded.actions_taken,
                status=excluded.status,
                updated_at=excluded.updated_at
        """,
            (
                str(ticket.id),
                ticket.pc_id,
                ticket.pc_name,
                ticket.user_name,
                ticket.patrimonial_id,
                ticket.brand,
                ticket.model,
                ticket.date.isoformat(),
                ticket.assigned_engineer,
                ticket.maintenance_type,
                ticket.problem_description,
                ticket.actions_taken,
                ticket.status,
                ticket.created_at.isoformat(),
                ticket.updated_at.isoformat(),
            ),
        )
        return ticket

    def get_by_id(self, ticket_id: UUID) -> Ticket | None:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT * FROM tickets WHERE id = ?", (str(ticket_id),)
            ).fetchone()
            return self._map_row(row) if row else None
        finally:
            conn.close()

    def list(self, status: str | None = None) -> builtins.list[Ticket]:
        conn = self._get_conn()
        try:
            query = "SELECT * FROM tickets WHERE 1=1"
            params: builtins.list[str] = []
            if status:
                query += " AND status = ?"
                params.append(status)
            query += " ORDER BY date DESC, created_at DESC"

            rows = conn.execute(query, params).fetchall()
            return [self._map_row(row) for row in rows]
        finally:
            conn.close()

    def delete(self, ticket_id: UUID) -> None:
        self._write("DELETE FROM tickets WHERE id = ?", (str(ticket_id),))

    def _map_row(self, row: dict[str, Any]) -> Ticket:
        return Ticket(
            id=UUID(row["id"]),
            pc_id=row["pc_id"],
            pc_name=row["pc_name"],
            user_name=row["user_name"],
            patrimonial_id=row["patrimonial_id"],
            brand=row["brand"],
            model=row["model"],
            date=date.fromisoformat(row["date"]),
            assigned_engineer=row["assigned_engineer"],
            maintenance_type=row["maintenance_type"],
            problem_description=row["problem_description"],
            actions_taken=row["actions_taken"],
            status=row["status"],
            created_at=_parse_dt(row["created_at"]),
            updated_at=_parse_dt(row["updated_at"]),
        )
