"""
微信开放接口地址
"""

from __future__ import annotations


# region 公众号
OA_OAUTH2_AUTHORIZE = "https://open.weixin.qq.com/connect/oauth2/authorize"
OA_CGI_BIN_ACCESS_TOKEN = "https://api.weixin.qq.com/cgi-bin/token"

OA_MENU_CREATE = "https://api.weixin.qq.com/cgi-bin/menu/create"
OA_MENU_ADD_CONDITIONAL = "https://api.weixin.qq.com/cgi-bin/menu/addconditional"
OA_MENU_TRY_MATCH = "https://api.weixin.qq.com/cgi-bin/menu/trymatch"
OA_MENU_GET = "https://api.weixin.qq.com/cgi-bin/menu/get"
OA_MENU_DELETE = "https://api.weixin.qq.com/cgi-bin/menu/delete"
OA_MENU_DELETE_CONDITIONAL = "https://api.weixin.qq.com/cgi-bin/menu/delconditional"
# endregion


# region 企业微信
CORP_OAUTH2_AUTHORIZE = "https://open.weixin.qq.com/connect/oauth2/authorize"
CORP_QRCODE_AUTHORIZE = "https://open.work.weixin.qq.com/wwopen/sso/qrConnect"
CORP_CGI_BIN_ACCESS_TOKEN = "https://qyapi.weixin.qq.com/cgi-bin/gettoken"

CORP_AGENT_GET = "https://qyapi.weixin.qq.com/cgi-bin/agent/get"
CORP_AGENT_LIST = "https://qyapi.weixin.qq.com/cgi-bin/agent/list"
CORP_AGENT_SET = "https://qyapi.weixin.qq.com/cgi-bin/agent/set"

CORP_MEDIA_UPLOAD = "https://qyapi.weixin.qq.com/cgi-bin/media/upload"
CORP_MEDIA_UPLOAD_IMAGE = "https://qyapi.weixin.qq.com/cgi-bin/media/uploadimg"
# endregion
