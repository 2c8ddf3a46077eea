from .sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
    SqlAlchemyCarRepository,
    SqlAlchemyFavoriteRepository,
)

__all__ = [
    "SqlAlchemyAccountRepository",
    "SqlAlchemyCarRepository",
    "SqlAlchemyFavoriteRepository",
]
