from fastapi import APIRouter
from fastapi.responses import JSONResponse

from .routing import ANY_METHOD

router = APIRouter(prefix="/api", tags=["hello"])

HELLO = {"message": "hello from go"}

@router.api_route("/hello", methods=ANY_METHOD)
def hello():
    return JSONResponse(HELLO)
