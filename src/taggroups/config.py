from .schema import OrphanPolicy


class ParserConfig:
    DEFAULT_DELIMITER: str = "\n"
    DEFAULT_ORPHAN_POLICY: OrphanPolicy = OrphanPolicy.error

    @classmethod
    def validate_config(cls) -> None:
        """Validate that all configuration values are sensible."""

        validate_delimiter(cls.DEFAULT_DELIMITER)

        if not isinstance(cls.DEFAULT_ORPHAN_POLICY, OrphanPolicy):
            raise ValueError(
                f"DEFAULT_ORPHAN_POLICY must be an OrphanPolicy, got {cls.DEFAULT_ORPHAN_POLICY!r}"
            )


def validate_delimiter(delimiter: str) -> str:
    """Check that the delimiter is exactly one character."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    return delimiter


def resolve_orphan_policy(policy) -> OrphanPolicy:
    """Turn a policy name or member into an OrphanPolicy, defaulting when None."""
    if policy is None:
        return ParserConfig.DEFAULT_ORPHAN_POLICY
    try:
        return OrphanPolicy(policy)
    except ValueError:
        raise ValueError(f"unknown orphan policy: {policy!r}") from None


ParserConfig.validate_config()


def get_default_delimiter() -> str:
    """Get the default line delimiter."""
    return ParserConfig.DEFAULT_DELIMITER


def get_default_orphan_policy() -> OrphanPolicy:
    """Get the default orphan line policy."""
    return ParserConfig.DEFAULT_ORPHAN_POLICY
