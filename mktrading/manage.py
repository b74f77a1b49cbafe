"""
Administrative commands: schema setup and login users
"""
import argparse
import sys
import logging

from sqlalchemy.schema import CreateIndex, CreateTable

from mktrading.core.database import Base, SessionLocal, Store, engine, init_db
from mktrading.core.exceptions import AppError
from mktrading.services.user_service import UserService

logger = logging.getLogger(__name__)


def schema_script(bind=None) -> str:
    """Static CREATE TABLE script for the configured database dialect"""
    import mktrading.models  # noqa: F401

    dialect = (bind or engine).dialect
    statements = []
    for table in Base.metadata.sorted_tables:
        statements.append(str(CreateTable(table).compile(dialect=dialect)).strip() + ";")
        for index in sorted(table.indexes, key=lambda ix: ix.name):
            statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip() + ";")
    return "\n\n".join(statements) + "\n"


def cmd_init_db(args):
    init_db()
    print("Database tables created.")


def cmd_create_user(args):
    db = SessionLocal()
    try:
        created = UserService(Store(db)).ensure_user(args.username, args.password)
    finally:
        db.close()
    if created:
        print(f"User '{args.username}' created.")
    else:
        print(f"User '{args.username}' already exists.")


def cmd_print_schema(args):
    sys.stdout.write(schema_script())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mktrading-manage",
        description="M.K. Trading API administration",
    )
    subparsers = parser.add_subparsers(dest="command")

    init_parser = subparsers.add_parser("init-db", help="Create all tables")
    init_parser.set_defaults(func=cmd_init_db)

    user_parser = subparsers.add_parser("create-user", help="Add a login user")
    user_parser.add_argument("username")
    user_parser.add_argument("password")
    user_parser.set_defaults(func=cmd_create_user)

    schema_parser = subparsers.add_parser("print-schema", help="Print the CREATE TABLE script")
    schema_parser.set_defaults(func=cmd_print_schema)

    return parser


def main(argv=None):
    logging.basicConfig(level=logging.INFO)
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1
    try:
        args.func(args)
    except AppError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
