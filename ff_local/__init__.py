"""FireFoundry local environment tooling."""

__version__ = "0.1.0"
