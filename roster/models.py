"""Core SQLAlchemy models (2.x style) for the member/team schema.

Member owns the relationship and holds the foreign key; Team is the
inverse side.
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class Team(Base):
    """Teams table."""
    __tablename__ = "team"

    id: Mapped[int] = mapped_column("team_id", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    members: Mapped[list[Member]] = relationship("Member", back_populates="team")

    def __repr__(self) -> str:
        return f"Team(id={self.id!r}, name={self.name!r})"


class Member(Base):
    """Members table."""
    __tablename__ = "member"

    id: Mapped[int] = mapped_column("member_id", Integer, primary_key=True, autoincrement=True)
    username: Mapped[str | None] = mapped_column(String(255))
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    team_id: Mapped[int | None] = mapped_column(ForeignKey("team.team_id"), index=True)

    # Relationship
    team: Mapped[Team | None] = relationship("Team", back_populates="members")

    def change_team(self, team: Team | None) -> None:
        """Move the member to ``team``, keeping both sides in sync."""
        # back_populates removes the member from the old team's collection
        self.team = team

    def __repr__(self) -> str:
        return f"Member(id={self.id!r}, username={self.username!r}, age={self.age!r})"
