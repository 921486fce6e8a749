from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is healthy"
