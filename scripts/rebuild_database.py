import sys
import os

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)  # relative imports

from punchcard import create_app, db


def rebuild_database():
    """Drop and recreate the users, events and scans tables"""
    app = create_app()
    with app.app_context():
        print("Dropping all tables...")
        db.drop_all()

        print("Creating all tables...")
        db.create_all()
        print(f"Database rebuilt successfully! Tables: {sorted(db.metadata.tables.keys())}")


if __name__ == "__main__":
    rebuild_database()
