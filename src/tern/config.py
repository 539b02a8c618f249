"""Router and application configuration.

Both configs are frozen dataclasses — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from tern.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    Timing is off by default. Turn it on to bracket the middleware
    chain with ``request.timer.time()`` / ``request.timer.time_end()``::

        router = Router(RouterConfig(enable_timing=True))
    """

    enable_timing: bool = False
    timing_label: str = "middleware"

    def __post_init__(self) -> None:
        if not self.timing_label:
            msg = "timing_label must be a non-empty string"
            raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class AppConfig(RouterConfig):
    """Application configuration: router settings plus the ASGI layer's."""

    debug: bool = False

    # Limits
    max_content_length: int = 16 * 1024 * 1024  # 16 MB

    def __post_init__(self) -> None:
        super(AppConfig, self).__post_init__()
        if self.max_content_length < 0:
            msg = f"max_content_length must be >= 0, got {self.max_content_length}"
            raise ConfigurationError(msg)
