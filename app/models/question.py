from sqlalchemy import Column, Integer, Text

from app.core.db import Base


class Question(Base):
    __tablename__ = "questions"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    body = Column(Text, nullable=False)
