"""Account and favorites service for the RentCar application."""

__version__ = "0.1.0"
