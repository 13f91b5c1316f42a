"""
Grant or revoke the admin flag of a user, looked up by email.

The flag travels inside access tokens, so the change applies to tokens
issued after this command runs.

    python -m socialnet.manage alice@example.com
    python -m socialnet.manage alice@example.com --revoke
"""

import argparse
import logging
import sys

from socialnet.core.config import get_settings
from socialnet.db.init_db import create_all_tables
from socialnet.db.session import create_db_engine, create_session_factory
from socialnet.modules.user_management.services.user import get_user_by_email

logger = logging.getLogger("socialnet.admin")

def set_admin_flag(session_factory, email: str, is_admin: bool) -> bool:
    """Set the admin flag; returns False when no user has that email"""
    db = session_factory()
    try:
        user = get_user_by_email(db, email=email)
        if not user:
            logger.error(f"No user found with email: {email}")
            return False

        user.is_admin = is_admin
        db.commit()
        logger.info(f"{'Granted' if is_admin else 'Revoked'} admin for user {user.id}")
        return True
    except Exception as e:
        db.rollback()
        logger.error(f"Updating admin flag failed: {e}")
        raise
    finally:
        db.close()

def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    parser = argparse.ArgumentParser(description="Grant or revoke admin rights")
    parser.add_argument("email", help="Email of the user to update")
    parser.add_argument("--revoke", action="store_true", help="Remove the admin flag instead of setting it")
    args = parser.parse_args(argv)

    engine = create_db_engine(get_settings())
    try:
        create_all_tables(engine)
        ok = set_admin_flag(create_session_factory(engine), args.email, not args.revoke)
    finally:
        engine.dispose()
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
