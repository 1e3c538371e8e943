"""Runtime package: logging setup and env-driven settings loading."""

__all__: list[str] = []
