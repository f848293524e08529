"""Backup and restore of current and future appointments.

A backup holds only appointments dated today or later. Restoring keeps
the past appointments already in the store untouched and replaces every
current and future appointment with the ones from the backup.
"""

import asyncio
import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple, Union
from models.appointment import Appointment, BackupDocument
from services.appointment_store import AppointmentStore
from config.constants import BACKUP_FILENAME_PREFIX
from config.settings import config
from utils.errors import FormatError
from utils.logger import setup_logger, ContextLogger

logger = setup_logger(__name__)


def partition_appointments(
    appointments: Iterable[Appointment],
    cutoff: date
) -> Tuple[List[Appointment], List[Appointment]]:
    """
    Split appointments at a cutoff day.

    Time-of-day is ignored. Appointments on the cutoff day, and those whose
    date cannot be read, land on the future side.

    Args:
        appointments: Appointments in store order
        cutoff: First day of the future side

    Returns:
        (past, future_or_today), each in input order
    """
    past = []
    future_or_today = []

    for apt in appointments:
        day = apt.day
        if day is not None and day < cutoff:
            past.append(apt)
        else:
            future_or_today.append(apt)

    return past, future_or_today


def export_backup(appointments: Iterable[Appointment], now: datetime) -> BackupDocument:
    """
    Build a backup of today's and future appointments.

    Args:
        appointments: All appointments
        now: Export time

    Returns:
        BackupDocument
    """
    _, future_or_today = partition_appointments(appointments, now.date())
    return BackupDocument(timestamp=now, appointments=future_or_today)


def _backup_records(document: Union[BackupDocument, dict]) -> List[Any]:
    if isinstance(document, BackupDocument):
        return list(document.appointments)

    if not isinstance(document, dict):
        raise FormatError("Backup must be a JSON object")

    records = document.get('appointments')
    if not isinstance(records, list):
        raise FormatError("Backup has no appointments list")

    return records


def import_backup(
    current: Iterable[Appointment],
    document: Union[BackupDocument, dict],
    now: datetime
) -> List[Appointment]:
    """
    Merge a backup into the current appointments.

    Past appointments are kept as they are; the backup's appointments take
    the place of everything dated today or later. Individual records are
    not checked: missing or ill-typed fields are defaulted.

    Args:
        current: Appointments currently in the store
        document: BackupDocument or the parsed JSON of a backup file
        now: Restore time

    Returns:
        New appointment list (past first, then backup records)

    Raises:
        FormatError: if the document has no appointments list
    """
    records = _backup_records(document)
    past, _ = partition_appointments(current, now.date())

    restored = [
        record if isinstance(record, Appointment) else Appointment.from_dict(record)
        for record in records
    ]
    return past + restored


def backup_filename(now: datetime) -> str:
    """File name for a backup exported at now."""
    return f"{BACKUP_FILENAME_PREFIX}{now.date().isoformat()}.json"


def dump_backup(document: BackupDocument) -> str:
    """Serialize a backup as indented JSON."""
    return json.dumps(document.to_dict(), ensure_ascii=False, indent=2)


def parse_backup(text: str) -> dict:
    """
    Parse backup file contents.

    Raises:
        FormatError: if the text is not a JSON object
    """
    try:
        data = json.loads(text)
    except (ValueError, TypeError) as e:
        raise FormatError(f"Backup is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise FormatError("Backup must be a JSON object")

    return data


def backup_size_kb(appointments: Iterable[Appointment], now: datetime) -> str:
    """Approximate size of the next backup in kilobytes, two decimals."""
    _, future_or_today = partition_appointments(appointments, now.date())
    payload = json.dumps(
        {'appointments': [apt.to_dict() for apt in future_or_today]},
        ensure_ascii=False,
        separators=(',', ':')
    )
    return f"{len(payload.encode('utf-8')) / 1024:.2f}"


async def save_backup_file(
    store: AppointmentStore,
    directory: Optional[Union[str, Path]] = None,
    now: Optional[datetime] = None
) -> Path:
    """
    Write a backup file of today's and future appointments.

    Args:
        store: Appointment store
        directory: Target directory, defaults to BACKUP_DIR
        now: Export time, defaults to the current time

    Returns:
        Path of the written file
    """
    now = now or datetime.now()
    target_dir = Path(directory or config.BACKUP_DIR)
    path = target_dir / backup_filename(now)
    ctx_logger = ContextLogger(logger, backup_file=path.name)

    document = export_backup(store.all(), now)
    text = dump_backup(document)

    def write():
        target_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding='utf-8')

    await asyncio.to_thread(write)
    ctx_logger.info(f"Backup created: {len(document.appointments)} appointments")
    return path


async def restore_from_file(
    store: AppointmentStore,
    path: Union[str, Path],
    now: Optional[datetime] = None
) -> int:
    """
    Restore today's and future appointments from a backup file.

    The store is changed by a single replace_all once the whole file has
    been read and checked; on any failure it is left as it was.

    Args:
        store: Appointment store
        path: Backup file
        now: Restore time, defaults to the current time

    Returns:
        Number of appointments loaded from the backup

    Raises:
        FormatError: if the file cannot be read or has no appointments list
    """
    now = now or datetime.now()
    path = Path(path)
    ctx_logger = ContextLogger(logger, backup_file=path.name)

    try:
        text = await asyncio.to_thread(path.read_text, encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        ctx_logger.error(f"Error reading backup: {e}")
        raise FormatError(f"Cannot read backup file: {e}") from e

    try:
        document = parse_backup(text)
        merged = import_backup(store.all(), document, now)
    except FormatError as e:
        ctx_logger.error(f"Invalid backup: {e}")
        raise

    store.replace_all(merged)
    restored = len(document['appointments'])
    ctx_logger.info(f"Backup restored: {restored} appointments")
    return restored
