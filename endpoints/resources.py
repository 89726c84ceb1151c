# resources.py
from __future__ import annotations

import logging
from typing import Any, NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from starlette.requests import ClientDisconnect

from json_codec import CodecError, JsonCodec
from persistence import (
    AsyncResourceRepository,
    Document,
    IdentifierGenerationError,
    InvalidIdentifierError,
    ResourceNotFoundError,
    StoreError,
)

router = APIRouter(prefix="/resources", tags=["resources"])
logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


def get_repository(request: Request) -> AsyncResourceRepository:
    return request.app.state.repository


def get_codec(request: Request) -> JsonCodec:
    return request.app.state.codec


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------
def _fail(status_code: int, op: str, message: str) -> NoReturn:
    if status_code >= 500:
        logger.error("%s failed: %s", op, message)
    else:
        logger.warning("%s rejected: %s", op, message)
    raise HTTPException(status_code=status_code, detail=message)


def _raise_store_error(op: str, exc: StoreError) -> NoReturn:
    if isinstance(exc, (InvalidIdentifierError, ResourceNotFoundError)):
        _fail(status.HTTP_400_BAD_REQUEST, op, str(exc))
    _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, op, str(exc))


def _encode(op: str, codec: JsonCodec, value: Any) -> bytes:
    try:
        return codec.marshal(value)
    except CodecError as e:
        _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, op, str(e))


def _json_response(body: bytes, status_code: int, headers: dict[str, str] | None = None) -> Response:
    return Response(content=body, status_code=status_code, media_type=JSON_MEDIA_TYPE, headers=headers)


async def read_document(op: str, request: Request, codec: JsonCodec) -> Document:
    """
    Read and decode the request body into a JSON object.

    Unreadable body -> 500; empty, malformed or non-object JSON -> 400.
    """
    try:
        raw = await request.body()
    except (ClientDisconnect, OSError) as e:
        _fail(status.HTTP_500_INTERNAL_SERVER_ERROR, op, f"failed to read request body: {e!r}")

    try:
        doc = codec.unmarshal(raw)
    except CodecError as e:
        _fail(status.HTTP_400_BAD_REQUEST, op, str(e))

    if not isinstance(doc, dict):
        _fail(status.HTTP_400_BAD_REQUEST, op, "request body must be a JSON object")
    return doc


# -------------------------------------------------------------------
# Routes
# -------------------------------------------------------------------
@router.get("")
async def list_resources(
    repo: AsyncResourceRepository = Depends(get_repository),
    codec: JsonCodec = Depends(get_codec),
) -> Response:
    docs = await repo.list_resources()
    if not docs:
        logger.info("Resources returned: 0")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    body = _encode("list resources", codec, docs)
    logger.info("Resources returned: %d", len(docs))
    return _json_response(body, status.HTTP_200_OK)


@router.get("/{resource_id}")
async def get_resource(
    resource_id: str,
    repo: AsyncResourceRepository = Depends(get_repository),
    codec: JsonCodec = Depends(get_codec),
) -> Response:
    op = f"get resource {resource_id}"
    try:
        doc = await repo.get_resource(resource_id)
    except StoreError as e:
        _raise_store_error(op, e)

    body = _encode(op, codec, doc)
    logger.info("Resource returned: id=%s fields=%d", resource_id, len(doc))
    return _json_response(body, status.HTTP_200_OK)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_resource(
    request: Request,
    repo: AsyncResourceRepository = Depends(get_repository),
    codec: JsonCodec = Depends(get_codec),
) -> Response:
    op = "create resource"
    doc = await read_document(op, request, codec)
    body = _encode(op, codec, doc)

    try:
        resource_id = await repo.create_resource(doc)
    except IdentifierGenerationError as e:
        _raise_store_error(op, e)

    location = str(request.url_for("get_resource", resource_id=resource_id))
    logger.info("Resource created: id=%s", resource_id)
    return _json_response(body, status.HTTP_201_CREATED, headers={"Location": location})


@router.put("/{resource_id}", status_code=status.HTTP_202_ACCEPTED)
async def update_resource(
    resource_id: str,
    request: Request,
    repo: AsyncResourceRepository = Depends(get_repository),
    codec: JsonCodec = Depends(get_codec),
) -> Response:
    op = f"update resource {resource_id}"
    try:
        await repo.check_resource(resource_id)
    except StoreError as e:
        _raise_store_error(op, e)

    doc = await read_document(op, request, codec)
    body = _encode(op, codec, doc)

    try:
        await repo.replace_resource(resource_id, doc)
    except StoreError as e:
        _raise_store_error(op, e)

    logger.info("Resource updated: id=%s", resource_id)
    return _json_response(body, status.HTTP_202_ACCEPTED)


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_resource(
    resource_id: str,
    repo: AsyncResourceRepository = Depends(get_repository),
) -> Response:
    op = f"delete resource {resource_id}"
    try:
        await repo.delete_resource(resource_id)
    except StoreError as e:
        _raise_store_error(op, e)

    logger.info("Resource deleted: id=%s", resource_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
