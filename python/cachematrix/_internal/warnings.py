"""cachematrix warning categories.

Subclass these to filter cachematrix warnings on their own instead of
silencing every UserWarning. No imports here; everything else imports it.
"""


class CacheMatrixWarning(UserWarning):
    """Base warning category for all cachematrix user-facing warnings."""


class CacheMatrixShapeWarning(CacheMatrixWarning):
    """A non-square matrix was rejected and the call ignored."""
