"""Blog ORM — persists blog posts. Same shape as User, unrelated to it."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.db.base import Base


class Blog(Base):
    __tablename__ = "blogs"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
