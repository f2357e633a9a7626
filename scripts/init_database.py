"""
Database initialization script.

Creates every table and optionally seeds the first administrator account
and the barangay profile. Run this once before starting the API server.

    python scripts/init_database.py --admin-username admin --admin-password secret \
        --admin-name "Juan Dela Cruz" --barangay-name "San Isidro" \
        --municipality "Tanauan" --province "Batangas"
"""
import argparse
import logging
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings, ensure_directories
from app.database import SessionLocal, init_db
from app.exceptions import BarangayError
from app.models.barangay_profile import BarangayProfile
from app.models.user import User
from app.services.auth_service import AuthService
from app.utils.constants import ADMIN_ROLE

# Setup logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def seed_admin(db, username: str, password: str, full_name: str) -> bool:
    """Create the administrator account unless the username exists."""
    if db.query(User.id).filter(User.username == username).first():
        logger.info(f"User {username} already exists, skipping")
        return False

    AuthService(db).register({
        "username": username,
        "password": password,
        "full_name": full_name,
        "role": ADMIN_ROLE,
    })
    logger.info(f"Created {ADMIN_ROLE} account {username}")
    return True


def seed_profile(db, barangay_name: str, municipality: str, province: str) -> bool:
    """Create the barangay profile row unless one is already saved."""
    if db.query(BarangayProfile.id).first():
        logger.info("Barangay profile already exists, skipping")
        return False

    db.add(BarangayProfile(
        barangay_name=barangay_name,
        municipality=municipality,
        province=province,
    ))
    db.commit()
    logger.info(f"Saved barangay profile: {barangay_name}, {municipality}, {province}")
    return True


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create the barangay records database")
    parser.add_argument("--admin-username", help="Username of the first administrator")
    parser.add_argument("--admin-password", help="Password of the first administrator")
    parser.add_argument("--admin-name", help="Full name of the first administrator")
    parser.add_argument("--barangay-name")
    parser.add_argument("--municipality")
    parser.add_argument("--province")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    ensure_directories()
    logger.info("Initializing database...")
    init_db()
    logger.info(f"Database ready at: {settings.database_url}")

    db = SessionLocal()
    try:
        if args.admin_username:
            if not (args.admin_password and args.admin_name):
                logger.error("--admin-password and --admin-name are required with --admin-username")
                sys.exit(1)
            seed_admin(db, args.admin_username, args.admin_password, args.admin_name)

        if args.barangay_name:
            if not (args.municipality and args.province):
                logger.error("--municipality and --province are required with --barangay-name")
                sys.exit(1)
            seed_profile(db, args.barangay_name, args.municipality, args.province)
    except BarangayError as e:
        logger.error(f"Could not seed database: {e.message}")
        db.rollback()
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error during initialization: {e}")
        db.rollback()
        raise
    finally:
        db.close()

    logger.info("Database initialization complete. Start the API with: python run_stable.py")


if __name__ == "__main__":
    main()
