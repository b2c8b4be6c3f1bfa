from ..extensions import db


class Performance(db.Model):
    __tablename__ = "performances"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id"), nullable=False, index=True)
    review_date = db.Column(db.Date, nullable=False)
    score = db.Column(db.Numeric(4, 2), nullable=False)
    comments = db.Column(db.Text, nullable=False)

    employee = db.relationship("Employee", back_populates="performances")
