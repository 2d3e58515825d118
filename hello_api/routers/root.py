# hello_api/routers/root.py

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from hello_api.common.deps import ANY_METHOD, get_request_logger

router = APIRouter(tags=["root"])


# 沒有被其他路由接走的路徑都會落到這裡
@router.api_route("/", methods=ANY_METHOD, response_class=PlainTextResponse)
@router.api_route(
    "/{full_path:path}", methods=ANY_METHOD, response_class=PlainTextResponse, include_in_schema=False
)
async def read_root(request: Request, logger: logging.Logger = Depends(get_request_logger)):
    logger.info("got request to %s", request.url.path)
    return "Hello world\n"
