from __future__ import annotations

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict


class Success(BaseModel):
    """Parsed JSON body of a 2xx PropertyData response, passed through unmodified."""

    model_config = ConfigDict(frozen=True)

    value: Any


class Failure(BaseModel):
    """
    A remote call that did not produce data.

    Covers both transport failures ("Request failed: ...") and non-2xx
    responses ("API Error <status>: <body>").
    """

    model_config = ConfigDict(frozen=True)

    message: str

    def as_payload(self) -> Dict[str, str]:
        return {"error": self.message}


ApiResult = Union[Success, Failure]
