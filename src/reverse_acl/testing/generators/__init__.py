"""Testing generators – Hypothesis strategies (requires ``hypothesis``)."""
from reverse_acl.testing.generators.strategies import (
    granting_strategy_strategy,
    mask_strategy,
    required_mask_strategy,
    security_identity_strategy,
)

__all__ = [
    "granting_strategy_strategy",
    "mask_strategy",
    "required_mask_strategy",
    "security_identity_strategy",
]
