#!/usr/bin/env python3
"""Give (or take back) the admin role of an existing user.
   Usage: python3 scripts/promote_admin.py user@example.com [--revoke]
   Reads DATABASE_URL / SECRET_KEY from .env like the API."""
import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from dotenv import load_dotenv  # noqa: E402

load_dotenv(ROOT / ".env")

from sqlmodel import Session, select  # noqa: E402

from app.core.database import engine, init_db  # noqa: E402
from app.models import User  # noqa: E402


def set_role(email: str, role: str) -> bool:
    with Session(engine) as db:
        user = db.exec(select(User).where(User.email == email)).first()
        if not user:
            return False
        user.role = role
        db.add(user)
        db.commit()
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email")
    parser.add_argument("--revoke", action="store_true", help="set the role back to 'user'")
    args = parser.parse_args(argv)
    init_db()
    role = "user" if args.revoke else "admin"
    if not set_role(args.email.strip(), role):
        print("User not found:", args.email)
        return 1
    print(f"{args.email}: role={role}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
