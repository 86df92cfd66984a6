"""データストア（Supabase REST / PostgREST）クライアント"""
import logging
from typing import Any, Dict, List, Optional

import requests
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from src.domain.exceptions import DataStoreError
from src.domain.value_objects.credentials import DataStoreCredentials

logger = logging.getLogger(__name__)


class DataStoreRestClient:
    """テーブル単位でREST APIを呼び出すクライアント"""

    def __init__(
        self,
        credentials: DataStoreCredentials,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ):
        """初期化

        Args:
            credentials: 接続情報
            session: 使い回すHTTPセッション（テスト時に差し替える）
            timeout: リクエストのタイムアウト秒数
        """
        self.base_url = credentials.rest_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "apikey": credentials.api_key,
            "Authorization": f"Bearer {credentials.api_key}",
            "Content-Type": "application/json",
        })

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(requests.ConnectionError),
        reraise=True,
    )
    def _request(
        self,
        method: str,
        table: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        url = f"{self.base_url}/{table}"
        logger.debug(f"{method} {url} params={params}")
        response = self.session.request(
            method,
            url,
            params=params,
            json=json,
            headers=headers,
            timeout=self.timeout,
        )

        if not response.ok:
            message = f"{method} {table} に失敗しました (HTTP {response.status_code}): {response.text}"
            logger.error(message)
            raise DataStoreError(message, status_code=response.status_code)

        if not response.content:
            return None
        return response.json()

    def select(
        self,
        table: str,
        columns: str = "*",
        filters: Optional[Dict[str, str]] = None,
        order: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """行を取得する

        Args:
            table: テーブル名
            columns: select句（埋め込み関連も指定可）
            filters: 列名 → PostgRESTの演算子付き値（例: ``"eq.1"``, ``"is.null"``）
            order: 並び順（例: ``"name.asc"``）
        """
        params = {"select": columns}
        params.update(filters or {})
        if order:
            params["order"] = order
        rows = self._request("GET", table, params=params)
        return rows if isinstance(rows, list) else []

    def select_one(
        self,
        table: str,
        columns: str = "*",
        filters: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        """1行だけ取得する（0行または複数行の場合は DataStoreError）"""
        params = {"select": columns}
        params.update(filters or {})
        return self._request(
            "GET",
            table,
            params=params,
            headers={"Accept": "application/vnd.pgrst.object+json"},
        )

    def insert(self, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """行を挿入し、挿入後の行を返す"""
        result = self._request(
            "POST",
            table,
            json=rows,
            headers={"Prefer": "return=representation"},
        )
        return result or []

    def update(self, table: str, values: Dict[str, Any], filters: Dict[str, str]) -> None:
        """条件に一致する行を更新する"""
        self._request("PATCH", table, params=filters, json=values)

    def delete(self, table: str, filters: Dict[str, str]) -> None:
        """条件に一致する行を削除する"""
        self._request("DELETE", table, params=filters)


def eq(value: Any) -> str:
    """PostgRESTの等価フィルタ"""
    return f"eq.{value}"
