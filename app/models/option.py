from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text

from app.core.db import Base


class Option(Base):
    __tablename__ = "options"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    # 列名沿用旧库的 camelCase；外键延迟到提交时检查，删除题目与选项的先后顺序不受约束
    question_id = Column(
        "questionId",
        Integer,
        ForeignKey("questions.id", deferrable=True, initially="DEFERRED"),
        nullable=False,
        index=True,
    )
    body = Column(Text, nullable=False)
    correct = Column(Boolean, nullable=False, default=False)
    option_order = Column("optionOrder", Integer, nullable=False)
