
from datetime import datetime
from pydantic import BaseModel, Field
from cityhall.models.enums import DocumentCategory

class DocumentUpload(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    file_name: str = Field(min_length=1, max_length=255)
    file_path: str = Field(min_length=1, max_length=1024)
    file_size: int = Field(gt=0)
    mime_type: str = Field(min_length=1, max_length=120)
    category: DocumentCategory
    department: str | None = None
    is_public: bool = False

class DocumentUploadIn(DocumentUpload):
    uploaded_by: int = Field(alias="uploadedBy")

    class Config:
        populate_by_name = True

class DocumentOut(BaseModel):
    id: int
    title: str
    description: str | None
    file_name: str
    file_path: str
    file_size: int
    mime_type: str
    category: DocumentCategory
    department: str | None
    uploaded_by: int
    is_public: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
