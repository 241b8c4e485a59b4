import logging
from typing import List

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.errors import DeviceQueryError, RowDecodeError
from ..models.device import Device
from ..schemas.common import DeviceOut

logger = logging.getLogger(__name__)

SKIP = "skip"
FAIL = "fail"

# SELECT id, name, ip_address, status FROM devices
DEVICE_QUERY = select(Device.id, Device.name, Device.ip_address, Device.status)


def scan_row(row) -> DeviceOut:
    return DeviceOut.model_validate(dict(row._mapping))


def list_devices(db: Session, policy: str = SKIP) -> List[DeviceOut]:
    """Run the fixed device query and scan every row into a DeviceOut.

    Rows come back in whatever order the store yields them. A row that
    fails to scan is dropped and logged under the ``skip`` policy, or
    aborts the whole call with RowDecodeError under ``fail``. Any database
    error is raised as DeviceQueryError carrying the driver's message.
    """
    try:
        result = db.execute(DEVICE_QUERY)
        devices, skipped = [], 0
        for position, row in enumerate(result):
            try:
                devices.append(scan_row(row))
            except ValidationError as exc:
                if policy == FAIL:
                    raise RowDecodeError(position, str(exc)) from exc
                skipped += 1
                logger.warning("skipping device row %d: %s", position, exc)
    except SQLAlchemyError as exc:
        logger.error("device query failed: %s", exc)
        raise DeviceQueryError(str(exc)) from exc
    if skipped:
        logger.warning("returned %d devices, skipped %d malformed rows", len(devices), skipped)
    else:
        logger.debug("returned %d devices", len(devices))
    return devices
