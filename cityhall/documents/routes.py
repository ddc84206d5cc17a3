
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from cityhall.auth.deps import get_db
from cityhall.models.enums import DocumentCategory
from cityhall.schemas.document import DocumentUploadIn, DocumentOut
from cityhall.documents import service

router = APIRouter(prefix="/documents", tags=["documents"])

@router.post("/upload", response_model=DocumentOut)
def upload(body: DocumentUploadIn, db: Session = Depends(get_db)):
    return service.upload_document(db, body, body.uploaded_by)

@router.get("/getAll", response_model=list[DocumentOut])
def get_all(user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_all_documents(db, user_id)

@router.get("/getByCategory", response_model=list[DocumentOut])
def get_by_category(category: DocumentCategory, user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_documents_by_category(db, category, user_id)

@router.get("/getByDepartment", response_model=list[DocumentOut])
def get_by_department(department: str, user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_documents_by_department(db, department, user_id)

@router.get("/search", response_model=list[DocumentOut])
def search(query: str, user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.search_documents(db, query, user_id)

@router.get("/getById", response_model=DocumentOut | None)
def get_by_id(document_id: int = Query(alias="documentId"), user_id: int = Query(alias="userId"), db: Session = Depends(get_db)):
    return service.get_document_by_id(db, document_id, user_id)
