"""Data-service response envelope returned by the catalog HTTP API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

SUCCESS_CODE = 200


class DataServiceResult(BaseModel):
    code: int = 0
    message: str = ""

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: Any) -> Any:
        # The service reports the code as either a JSON number or a string.
        if isinstance(value, str):
            return int(value.strip() or 0)
        return value


class DataServicePayload(BaseModel):
    rows: list[dict[str, Any]] = Field(default_factory=list)
    result: DataServiceResult = Field(default_factory=DataServiceResult)

    @field_validator("rows", mode="before")
    @classmethod
    def _null_rows(cls, value: Any) -> Any:
        return [] if value is None else value


class DataServiceResponse(BaseModel):
    type: str = ""
    data: DataServicePayload

    @property
    def ok(self) -> bool:
        return self.data.result.code == SUCCESS_CODE
