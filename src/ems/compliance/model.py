from ..extensions import db


class Compliance(db.Model):
    __tablename__ = "compliances"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id"), nullable=False, index=True)
    policy = db.Column(db.String(200), nullable=False)
    acknowledged_on = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(50), nullable=False)

    employee = db.relationship("Employee", back_populates="compliances")
