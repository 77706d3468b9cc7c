"""SQLAlchemy ORM models for persisted simulations"""

from sqlalchemy import Column, Integer, Float, DateTime, Text, CheckConstraint
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Simulation(Base):
    """Scored applicant submission"""

    __tablename__ = "simulations"
    __table_args__ = (
        CheckConstraint("credit_history IN ('good', 'bad')", name="ck_simulations_credit_history"),
        CheckConstraint(
            "risk_category IN ('Low risk', 'Medium risk', 'High risk')",
            name="ck_simulations_risk_category",
        ),
        CheckConstraint("score BETWEEN 300 AND 850", name="ck_simulations_score_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    age = Column(Integer, nullable=False)
    annual_income = Column(Float, nullable=False)
    debt_to_income_ratio = Column(Float, nullable=False)
    loan_amount = Column(Float, nullable=False)
    credit_history = Column(Text, nullable=False)
    score = Column(Integer, nullable=False)
    risk_category = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
