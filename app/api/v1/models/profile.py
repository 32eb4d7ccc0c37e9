from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.models import Base


class Profile(Base):
    """Application profile, keyed by the id of the authenticated user."""
    __tablename__ = "profiles"

    email: Mapped[str] = mapped_column(String(255), index=True, nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    onboarding_status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="pending", server_default="pending"
    )

    def __repr__(self):
        return f"<Profile(id='{self.id}', email='{self.email}')>"
