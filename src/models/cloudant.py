"""
Pydantic models for the envelopes Cloudant returns around write operations
"""

from pydantic import BaseModel, ConfigDict, Field

class CreateResponse(BaseModel):
    """Envelope returned when a document is inserted"""
    ok: bool
    id: str
    rev: str

class RevisionResponse(BaseModel):
    """The identifying fields of a stored document"""
    model_config = ConfigDict(populate_by_name=True)

    doc_id: str = Field(..., alias="_id")
    rev: str = Field(..., alias="_rev")

class OkResponse(BaseModel):
    """Envelope returned by delete and database operations"""
    ok: bool
