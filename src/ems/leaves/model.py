from ..extensions import db


class Leave(db.Model):
    __tablename__ = "leaves"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id"), nullable=False, index=True)
    leave_type = db.Column(db.String(50), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    # Free text, no transition rules (Pending / Approved / ...)
    status = db.Column(db.String(50), nullable=False)

    employee = db.relationship("Employee", back_populates="leaves")
