"""Utility script to create the reserved administrator account."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users import create_admin_user
from app.domain.errors import DomainError
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the administrator account."""

    parser = argparse.ArgumentParser(
        description="Create the administrator account (id 1) for the Baco API.",
    )
    parser.add_argument("--cpf", required=True, help="CPF usado como login do administrador")
    parser.add_argument(
        "--email",
        default="admin@baco.app",
        help="E-mail do administrador (padrão: admin@baco.app)",
    )
    parser.add_argument("--first-name", default="Administrador", help="Nome do administrador")
    parser.add_argument("--last-name", default="Baco", help="Sobrenome do administrador")
    parser.add_argument(
        "--password",
        default=None,
        help="Senha do administrador. Se omitida será solicitada interativamente.",
    )
    return parser.parse_args()


def main() -> None:
    """Create the administrator using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Informe a senha do administrador: ")
    if not password:
        raise SystemExit("Nenhuma senha válida foi informada.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_admin_user(
            session,
            username=args.cpf,
            password=password,
            email=args.email,
            first_name=args.first_name,
            last_name=args.last_name,
        )
    except DomainError as exc:
        raise SystemExit(f"Não foi possível criar o administrador: {exc.message}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Erro ao salvar o administrador no banco de dados: {exc}") from exc
    else:
        print(
            "Administrador criado com sucesso:\n"
            f"  ID: {user.id}\n"
            f"  Nome: {user.full_name}\n"
            f"  Email: {user.email}"
        )
    finally:
        session.close()


if __name__ == "__main__":
    main()
