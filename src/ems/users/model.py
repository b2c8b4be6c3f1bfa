from ..extensions import db


class User(db.Model):
    """Login account of an employee (one per employee).

    Only the password hash is persisted, never the submitted password.
    """

    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id"), nullable=False, unique=True)
    username = db.Column(db.String(50), nullable=False, unique=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(50), nullable=False, default="User")

    employee = db.relationship("Employee", back_populates="user")
