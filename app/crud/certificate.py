from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.certificate import Certificate
from app.schemas.certificate import CertificateCreate, CertificateUpdate


class CRUDCertificate(CRUDBase[Certificate, CertificateCreate, CertificateUpdate]):
    def get_by_user_and_program(self, db: Session, *, user_id: int, program_id: int) -> Optional[Certificate]:
        return db.query(Certificate).filter(
            Certificate.user_id == user_id,
            Certificate.program_id == program_id
        ).first()

    def get_by_user(self, db: Session, *, user_id: int) -> List[Certificate]:
        return (
            db.query(Certificate)
            .filter(Certificate.user_id == user_id)
            .order_by(Certificate.issued_at)
            .all()
        )

    def get_issued_between(
        self, db: Session, *, start_date: Optional[datetime] = None, end_date: Optional[datetime] = None
    ) -> List[Certificate]:
        query = db.query(Certificate)
        if start_date:
            query = query.filter(Certificate.issued_at >= start_date)
        if end_date:
            query = query.filter(Certificate.issued_at <= end_date)
        return query.order_by(Certificate.issued_at).all()


certificate = CRUDCertificate(Certificate)
