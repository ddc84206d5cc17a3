
import logging
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from cityhall.errors import ConstraintViolationError
from cityhall.models.document import Document
from cityhall.models.enums import DocumentCategory
from cityhall.schemas.document import DocumentUpload
from cityhall.utils.visibility import document_visibility_clause, document_visible_to

logger = logging.getLogger(__name__)

def _visible(db: Session, user_id: int):
    return (db.query(Document)
              .filter(document_visibility_clause(user_id))
              .order_by(Document.created_at.desc(), Document.id.desc()))

def _like_pattern(query: str) -> str:
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"

def upload_document(db: Session, body: DocumentUpload, uploaded_by: int) -> Document:
    doc = Document(
        title=body.title,
        description=body.description,
        file_name=body.file_name,
        file_path=body.file_path,
        file_size=body.file_size,
        mime_type=body.mime_type,
        category=body.category,
        department=body.department,
        uploaded_by=uploaded_by,
        is_public=body.is_public,
    )
    db.add(doc)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning("document upload rejected for uploader id=%s: %s", uploaded_by, e.orig)
        raise ConstraintViolationError(f"Uploader with id {uploaded_by} does not exist")
    db.refresh(doc)
    logger.info("document id=%s uploaded by user id=%s", doc.id, uploaded_by)
    return doc

def get_all_documents(db: Session, user_id: int) -> list[Document]:
    return _visible(db, user_id).all()

def get_documents_by_category(db: Session, category: DocumentCategory, user_id: int) -> list[Document]:
    return _visible(db, user_id).filter(Document.category == category).all()

def get_documents_by_department(db: Session, department: str, user_id: int) -> list[Document]:
    return _visible(db, user_id).filter(Document.department == department).all()

def search_documents(db: Session, query: str, user_id: int) -> list[Document]:
    pattern = _like_pattern(query.strip())
    return _visible(db, user_id).filter(
        or_(
            Document.title.ilike(pattern, escape="\\"),
            Document.description.ilike(pattern, escape="\\"),
        )
    ).all()

def get_document_by_id(db: Session, document_id: int, user_id: int) -> Document | None:
    doc = db.get(Document, document_id)
    if doc is None or not document_visible_to(doc, user_id):
        return None
    return doc
