"""
Defines the KycApplication model: one KYC process per user.
"""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from kycbank.extensions import Base

NOT_STARTED = "not_started"
CUSTOMER_CREATED = "customer_created"
IN_PROGRESS = "in_progress"
VERIFIED = "verified"


class KycApplication(Base):
    """
    Tracks a user's progress through customer creation, BVN and bank checks.

    Attributes
    ----------
    user_id : str
        Identifier of the user (JWT subject).
    customer_code : str
        Provider customer code, CUS_xxx.
    status : str
        not_started, customer_created, in_progress or verified.
    bvn_verified : bool
        BVN step accepted.
    bank_verified : bool
        Bank account step accepted; bank_* columns hold the accepted account.
    verified_at : datetime
        Set once both steps are accepted.
    """

    __tablename__ = "kyc_applications"

    id = Column(Integer, primary_key=True)
    user_id = Column(String(64), unique=True, index=True, nullable=False)

    email = Column(String(255), nullable=False)
    first_name = Column(String(128), nullable=False)
    last_name = Column(String(128), nullable=False)
    phone = Column(String(32), nullable=False)

    customer_code = Column(String(64), index=True)
    provider = Column(String(32))
    status = Column(String(32), default=NOT_STARTED, nullable=False)

    bvn = Column(String(11))
    bvn_name = Column(String(255))
    bvn_verified = Column(Boolean, default=False, nullable=False)

    bank_code = Column(String(16))
    bank_name = Column(String(128))
    account_number = Column(String(12))
    account_name = Column(String(255))
    bank_verified = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    verified_at = Column(DateTime)

    records = relationship(
        "VerificationRecord",
        back_populates="application",
        order_by="VerificationRecord.id",
    )

    @property
    def customer_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def to_dict(self, include_records=False):
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "phone": self.phone,
            "customer_code": self.customer_code,
            "provider": self.provider,
            "status": self.status,
            "bvn_verified": self.bvn_verified,
            "bvn_name": self.bvn_name,
            "bank_verified": self.bank_verified,
            "bank_account": {
                "bank_code": self.bank_code,
                "bank_name": self.bank_name,
                "account_number": self.account_number,
                "account_name": self.account_name,
            } if self.bank_verified else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "verified_at": self.verified_at.isoformat() if self.verified_at else None,
        }
        if include_records:
            data["records"] = [r.to_dict() for r in self.records]
        return data
