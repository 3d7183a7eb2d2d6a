"""
Defines the VerificationRecord model: one row per bank account check.
"""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, event
from sqlalchemy.orm import relationship

from kycbank.extensions import Base


class VerificationRecord(Base):
    __tablename__ = "verification_records"

    id = Column(Integer, primary_key=True)
    application_id = Column(Integer, ForeignKey("kyc_applications.id"), nullable=False, index=True)

    account_number = Column(String(12), nullable=False)
    account_name = Column(String(255))
    bank_code = Column(String(16), nullable=False)
    bank_name = Column(String(128))

    verified = Column(Boolean, default=False, nullable=False)
    match_status = Column(String(16), nullable=False)
    confidence = Column(String(16), nullable=False)
    provider = Column(String(32))
    accepted = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    application = relationship("KycApplication", back_populates="records")

    @classmethod
    def from_verification(cls, application, verification, *, provider, accepted):
        return cls(
            application_id=application.id,
            account_number=verification.account_number,
            account_name=verification.account_name,
            bank_code=verification.bank_code,
            bank_name=verification.bank_name,
            verified=verification.verified,
            match_status=verification.match_status.value,
            confidence=verification.confidence.value,
            provider=provider,
            accepted=accepted,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "account_number": self.account_number,
            "account_name": self.account_name,
            "bank_code": self.bank_code,
            "bank_name": self.bank_name,
            "verified": self.verified,
            "match_status": self.match_status,
            "confidence": self.confidence,
            "provider": self.provider,
            "accepted": self.accepted,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@event.listens_for(VerificationRecord, "before_update")
def _reject_update(mapper, connection, target):
    raise RuntimeError("VerificationRecord rows are write-once")
