"""Commerce DDD sample: customers, products and orders persisted with SQLAlchemy."""

__version__ = "0.1.0"
