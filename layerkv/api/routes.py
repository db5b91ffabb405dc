"""
HTTP Routes

Maps HTTP verbs on a URL path to operations on the store held in
app.state.store. The key is the path without its leading slash:

    GET    /users/42   -> store.get("users/42")     200 + raw bytes
    PUT    /users/42   -> store.set("users/42", body) 200
    DELETE /users/42   -> store.delete("users/42")  200

Errors map by kind: invalid key -> 400, not found -> 404,
I/O and configuration -> 500.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool

from ..errors import ErrorKind, KVError

router = APIRouter()
logger = logging.getLogger(__name__)

STATUS_FOR_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.IO: 500,
    ErrorKind.CONFIGURATION: 500,
    ErrorKind.INVALID_KEY: 400,
}


def validate_key(key: str) -> str:
    """
    Reject keys the file store must never see.

    The root path, keys with empty, "." or ".." segments and keys holding
    a NUL byte are refused, which keeps every key inside the store's root
    directory and gives each file exactly one spelling.
    """
    if not key:
        raise HTTPException(status_code=400, detail="key must not be empty")
    if "\x00" in key:
        raise HTTPException(status_code=400, detail="key must not contain NUL bytes")
    for segment in key.split("/"):
        if segment in ("", ".", ".."):
            raise HTTPException(status_code=400, detail=f"invalid key: {key}")
    return key


def _http_error(exc: KVError) -> HTTPException:
    return HTTPException(status_code=STATUS_FOR_KIND.get(exc.kind, 500), detail=str(exc))


@router.get("/{key:path}")
def get_value(key: str, request: Request):
    key = validate_key(key)
    try:
        value = request.app.state.store.get(key)
    except KVError as exc:
        raise _http_error(exc) from exc
    return Response(content=value, media_type="application/octet-stream")


@router.put("/{key:path}")
async def put_value(key: str, request: Request):
    key = validate_key(key)
    body = await request.body()
    logger.info(f"set {key} ({len(body)} bytes)")
    try:
        await run_in_threadpool(request.app.state.store.set, key, body)
    except KVError as exc:
        raise _http_error(exc) from exc
    return Response(status_code=200)


@router.delete("/{key:path}")
def delete_value(key: str, request: Request):
    key = validate_key(key)
    logger.info(f"del {key}")
    try:
        request.app.state.store.delete(key)
    except KVError as exc:
        raise _http_error(exc) from exc
    return Response(status_code=200)
