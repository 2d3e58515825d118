# hello_api/common/deps.py

import logging

REQUEST_LOGGER_NAME = "hello_api.requests"

# 跟原本的 Go handler 一樣，不挑 method
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_request_logger() -> logging.Logger:
    # 測試時可以用 app.dependency_overrides 換掉
    return logging.getLogger(REQUEST_LOGGER_NAME)
