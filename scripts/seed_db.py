from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ems.database.bootstrap import init_schema, seed_demo_data
from ems.main import create_app


def main() -> None:
    app = create_app({"AUTO_INIT_DB": False, "AUTO_SEED_DB": False})
    with app.app_context():
        init_schema()
        added = seed_demo_data()
    if added:
        print(f"OK: Seeded {added} employees -> {app.config['SQLALCHEMY_DATABASE_URI']}")
    else:
        print("OK: Database already has employees, nothing seeded")


if __name__ == "__main__":
    main()
