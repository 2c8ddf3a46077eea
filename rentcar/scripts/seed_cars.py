# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Insert car records for local development.

Car inventory is owned by another service; this helper only exists so that
favorites can be exercised against a local database.
"""

from __future__ import annotations

import argparse
from decimal import Decimal

from rentcar.domain.accounts.entities import Car
from rentcar.infrastructure.container import Container
from rentcar.shared.logging import logger, setup_logging


def main(argv: list[str] | None = None, *, app_container: Container | None = None) -> None:
    parser = argparse.ArgumentParser(description="Add a car to the local database")
    parser.add_argument("make")
    parser.add_argument("model")
    parser.add_argument("--id", type=int, default=0, help="Explicit car id")
    parser.add_argument("--year", type=int, default=None)
    parser.add_argument("--price-per-day", type=Decimal, default=None)
    args = parser.parse_args(argv)

    if app_container is None:
        app_container = Container()
    setup_logging(log_file=app_container.config.log_file)
    app_container.database.create_schema()
    car = app_container.car_repository.add(
        Car(
            id=args.id,
            make=args.make,
            model=args.model,
            year=args.year,
            price_per_day=args.price_per_day,
        )
    )
    logger.info(f"seed: car id={car.id} {car.make} {car.model}")
    print(car.id)


if __name__ == "__main__":
    main()
