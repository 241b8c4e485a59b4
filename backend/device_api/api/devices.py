from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from ..db.session import get_db
from ..schemas.common import DeviceOut
from ..services.device_query import list_devices
from typing import List

from .routing import ANY_METHOD

router = APIRouter(prefix="/api", tags=["devices"])

@router.api_route("/devices", methods=ANY_METHOD, response_model=List[DeviceOut])
def devices(request: Request, db: Session = Depends(get_db)):
    return list_devices(db, policy=request.app.state.settings.ROW_DECODE_POLICY)
