"""Controller outcome model handed to the external response formatter."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ResultKind(str, Enum):
    CREATED = "created"
    OK = "ok"


class ControllerResult(BaseModel):
    """Successful controller outcome.

    Failures are raised, never returned.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: ResultKind
    message: str
    data: Any = None
    pagination: Optional[Dict[str, Any]] = None
