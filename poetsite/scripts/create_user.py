"""
Create an account (e.g. the first super admin). Run from project root:
  python -m poetsite.scripts.create_user EMAIL PASSWORD [role] [--name NAME]
Example:
  python -m poetsite.scripts.create_user admin@example.com your-secure-password SUPER_ADMIN
"""
import argparse
import logging
import re
import sys

from poetsite.core.database import SessionLocal
from poetsite.core.roles import Role
from poetsite.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from poetsite.models import User
from poetsite.schemas.auth import EMAIL_PATTERN


logger = logging.getLogger("poetsite.scripts.create_user")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    parser = argparse.ArgumentParser(description="Create a poetsite account.")
    parser.add_argument("email", help="Account email")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=Role.USER.value, choices=[r.value for r in Role])
    parser.add_argument("--name", default=None, help="Display name")
    args = parser.parse_args()

    email = args.email.strip()
    if not re.match(EMAIL_PATTERN, email):
        logger.error("Invalid email address.")
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        logger.error("Password must be %d-%d characters.", PASSWORD_MIN_LEN, PASSWORD_MAX_LEN)
        return 1

    db = SessionLocal()
    try:
        if db.query(User.id).filter(User.email == email).first() is not None:
            logger.error("Account '%s' already exists.", email)
            return 1
        user = User(
            email=email,
            name=args.name,
            password_hash=hash_password(args.password),
            role=args.role,
        )
        db.add(user)
        db.commit()
        logger.info("Created account '%s' with role '%s'.", email, args.role)
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
