"""Shared upload models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class Upload(BaseModel):
    """Upload metadata returned by the Uploads API."""

    model_config = ConfigDict(from_attributes=True)

    id: StrictStr = Field(..., description="Time-ordered unique upload identifier")
    name: StrictStr = Field(..., description="Original file name")
    remote_key: StrictStr = Field(..., description="Object key in remote storage")
    remote_url: StrictStr = Field(..., description="Public URL of the stored object")
    created_at: datetime = Field(..., description="Creation timestamp assigned by the database")


class StoredFile(BaseModel):
    """Location of an object written to remote storage."""

    key: StrictStr = Field(..., description="Object key inside the bucket")
    url: StrictStr = Field(..., description="Publicly resolvable URL")


class ListUploadsOutput(BaseModel):
    """A page of uploads plus the total matching count."""

    uploads: list[Upload] = Field(..., description="Uploads on the requested page")
    total: StrictInt = Field(..., description="Total number of uploads matching the filter")
