"""認証情報を表す値オブジェクト"""
from pydantic import BaseModel, Field


class DataStoreCredentials(BaseModel):
    """データストア（Supabase REST）接続情報の値オブジェクト"""

    url: str = Field(..., description="プロジェクトURL")
    api_key: str = Field(..., description="匿名APIキー")

    @property
    def rest_url(self) -> str:
        """REST APIのベースURL（スキーム省略時は https を補う）"""
        base = self.url if self.url.startswith("http") else f"https://{self.url}"
        return f"{base.rstrip('/')}/rest/v1"

    class Config:
        frozen = True
