from __future__ import annotations

import json
import logging
import sys

from wxkit.config import LoggingSettings
from wxkit.utils.logger import JsonFormatter, setup_logging


def _record(msg: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="wxkit.wx.dispatcher",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_keeps_chinese_message() -> None:
    payload = json.loads(JsonFormatter().format(_record("菜单创建失败")))

    assert payload["message"] == "菜单创建失败"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "wxkit.wx.dispatcher"


def test_json_formatter_copies_dispatch_extras() -> None:
    record = _record("wx api error")
    record.path = "/cgi-bin/menu/create"
    record.errcode = 40013
    record.errmsg = "invalid appid"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["path"] == "/cgi-bin/menu/create"
    assert payload["errcode"] == 40013
    assert payload["errmsg"] == "invalid appid"
    assert "method" not in payload


def test_json_formatter_redacts_credentials() -> None:
    record = _record(
        "Server error '502 Bad Gateway' for url "
        "'https://qyapi.weixin.qq.com/cgi-bin/gettoken?corpid=CORPID&corpsecret=S3CRET'"
    )
    record.path = "/cgi-bin/menu/get?access_token=ACCESS_TOKEN&x=1"

    payload = json.loads(JsonFormatter().format(record))

    assert "S3CRET" not in payload["message"]
    assert "corpid=CORPID&corpsecret=***" in payload["message"]
    assert payload["path"] == "/cgi-bin/menu/get?access_token=***&x=1"


def test_json_formatter_redacts_exception_text() -> None:
    try:
        raise RuntimeError("GET https://api.weixin.qq.com/cgi-bin/menu/get?access_token=ACCESS_TOKEN failed")
    except RuntimeError:
        record = logging.LogRecord(
            name="wxkit.wx.client",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="request failed",
            args=(),
            exc_info=sys.exc_info(),
        )

    payload = json.loads(JsonFormatter().format(record))

    assert "ACCESS_TOKEN" not in payload["exc_info"]
    assert "access_token=***" in payload["exc_info"]


def test_setup_logging_configures_only_package_logger(monkeypatch) -> None:
    package_logger = logging.getLogger("wxkit")
    monkeypatch.setattr(package_logger, "handlers", [])
    monkeypatch.setattr(package_logger, "level", package_logger.level)
    monkeypatch.setattr(package_logger, "propagate", package_logger.propagate)
    root_handlers = list(logging.getLogger().handlers)

    logger = setup_logging(LoggingSettings(level="debug", format="json"))
    setup_logging(LoggingSettings(level="warning", format="json"))

    assert logger is package_logger
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
    assert logging.getLogger().handlers == root_handlers
