"""Data access layer for simulations"""

from typing import List, Optional
from sqlalchemy.orm import Session
from credit_simulator.infrastructure.database.models import Simulation
from credit_simulator.domain.models import ApplicantInput, ScoringResult


class SimulationRepository:
    """Repository for scored simulations"""

    def __init__(self, db: Session):
        self.db = db

    def create_simulation(self, applicant: ApplicantInput, result: ScoringResult) -> Simulation:
        """Persist applicant and score; caller owns the commit"""
        db_simulation = Simulation(
            name=applicant.name,
            age=applicant.age,
            annual_income=applicant.annual_income,
            debt_to_income_ratio=applicant.debt_to_income_ratio,
            loan_amount=applicant.loan_amount,
            credit_history=applicant.credit_history,
            score=result.score,
            risk_category=result.risk_category,
        )
        self.db.add(db_simulation)
        self.db.flush()  # Get ID without committing
        return db_simulation

    def list_simulations(self, limit: Optional[int] = None) -> List[Simulation]:
        """Fetch simulations, newest first"""
        query = self.db.query(Simulation).order_by(Simulation.created_at.desc(), Simulation.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_simulation_by_id(self, simulation_id: int) -> Optional[Simulation]:
        return (
            self.db.query(Simulation)
            .filter(Simulation.id == simulation_id)
            .first()
        )
