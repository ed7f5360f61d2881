"""Strongly typed identifiers for board domain entities.

Identifiers are opaque strings issued by the platform (the post and user
tables use text keys), wrapped with NewType so that a PostId cannot be
passed where a UserId is expected.
"""

from typing import NewType

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
