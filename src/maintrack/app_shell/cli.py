import argparse
import getpass
import logging
import sys

from maintrack.adapters.auth.crypto import JWTAuthAdapter
from maintrack.adapters.clock import SystemClock
from maintrack.adapters.sqlite.migrator import SQLiteMigrator
from maintrack.adapters.sqlite.repos import SQLiteUserRepo
from maintrack.api.deps import Settings
from maintrack.app_shell.seed import seed_demo_data
from maintrack.domain.entities import User
from maintrack.rules.loader import load_rules
from maintrack.rules.models import Rules

logger = logging.getLogger("cli")


def get_rules(settings: Settings) -> Rules:
    try:
        return load_rules(settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("Cannot load rules: %s", e)
        sys.exit(1)


def handle_migrate(settings: Settings, args: argparse.Namespace) -> None:
    applied = SQLiteMigrator(settings.db_path).run_migrations()
    print(f"Applied {len(applied)} migration(s) to {settings.db_path}.")


def handle_seed(settings: Settings, args: argparse.Namespace) -> None:
    rules = get_rules(settings)
    SQLiteMigrator(settings.db_path).run_migrations()
    equipment, records = seed_demo_data(settings.db_path, rules)
    print(f"Seeded {equipment} computers and {records} maintenance records.")


def handle_create_admin(settings: Settings, args: argparse.Namespace) -> None:
    rules = get_rules(settings)
    SQLiteMigrator(settings.db_path).run_migrations()

    email = args.email.strip().lower()
    password = args.password or getpass.getpass("Password: ")
    if len(password) < rules.auth.password_min_length:
        logger.error("Password must be at least %d characters", rules.auth.password_min_length)
        sys.exit(1)

    repo = SQLiteUserRepo(settings.db_path)
    if repo.get_by_email(email):
        logger.error("User %s already exists.", email)
        sys.exit(1)

    now = SystemClock().now_utc()
    user = User(
        email=email,
        display_name=args.display_name or email.split("@")[0],
        password_hash=JWTAuthAdapter(settings.secret_key).hash_password(password),
        roles=["admin"],
        created_at=now,
        updated_at=now,
    )
    repo.save(user)
    print(f"Admin {email} created.")


def handle_serve(settings: Settings, args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run("maintrack.api.main:app", host=args.host, port=args.port, reload=args.reload)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    parser = argparse.ArgumentParser(description="MaintTrack CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    subparsers.add_parser("migrate", help="Apply pending database migrations")

    # seed
    subparsers.add_parser("seed", help="Load the demo computers and maintenance records")

    # create-admin
    admin_parser = subparsers.add_parser("create-admin", help="Create an admin account")
    admin_parser.add_argument("email", help="Admin email (login name)")
    admin_parser.add_argument("--password", help="Password (prompted when omitted)")
    admin_parser.add_argument("--display-name", help="Display name (default: email local part)")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    args = parser.parse_args()
    settings = Settings()

    handlers = {
        "migrate": handle_migrate,
        "seed": handle_seed,
        "create-admin": handle_create_admin,
        "serve": handle_serve,
    }
    handlers[args.command](settings, args)


if __name__ == "__main__":
    main()
