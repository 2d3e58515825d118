# hello_api/routers/hello.py

import logging
from typing import List

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from hello_api.common.deps import ANY_METHOD
from hello_api.services import greeting as greeting_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hello", tags=["hello"])


@router.api_route("", methods=ANY_METHOD, response_class=PlainTextResponse)
async def say_hello(name: List[str] = Query(default=[])):
    if not name:
        return "Hello, no one?\n"

    try:
        return greeting_service.greet(name)
    except greeting_service.InvalidInput as e:
        # 理論上不會發生，上面已經擋掉空的 name
        logger.error("greeting failed: %s", e)
        return PlainTextResponse("Internal error\n", status_code=500)
