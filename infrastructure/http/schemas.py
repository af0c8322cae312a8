from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"


class PullErrorDetail(BaseModel):
    kind: str
    message: str
