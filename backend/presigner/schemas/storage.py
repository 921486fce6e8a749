from pydantic import BaseModel, ConfigDict, Field


class PresignRequest(BaseModel):
    filename: str = Field(..., min_length=1)
    content_type: str = Field(..., min_length=1, alias="contentType")


class SignedUploadGrant(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    upload_url: str = Field(..., alias="uploadUrl")
    key: str


class ErrorResponse(BaseModel):
    error: str
