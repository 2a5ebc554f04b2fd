"""statustext-specific exceptions."""


class StatusTextConfigError(Exception):
    """Raised when a config file holds an overlay entry that cannot be applied.

    Resolver lookups never raise; only turning config into a resolver does.
    The CLI prints the message and exits non-zero.
    """
