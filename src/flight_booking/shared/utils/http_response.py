import json

from pydantic import BaseModel


def api_response(status_code: int, body: dict | BaseModel) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する

    pydantic モデルはそのまま渡せる（Decimal・日付は文字列になる）。
    """
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json")
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str, ensure_ascii=False),
    }
